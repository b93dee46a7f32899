# vendas/services/dto.py

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass
class DadosVenda:
    """
    Dados do formulário de saída (venda).
    preco_unitario None -> usa o preço atual do produto.
    """

    produto_id: str
    cliente_id: str
    quantidade: int
    preco_unitario: Optional[Decimal] = None
    desconto: Decimal = field(default_factory=lambda: Decimal("0.00"))
    data: Optional[datetime] = None
    id: Optional[str] = None
