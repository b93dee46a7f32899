# carrinho/services/dto.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from carrinho.services.exceptions import PromocaoInvalidaError


@dataclass
class ItemCarrinho:
    """
    Linha do carrinho: snapshot do produto + quantidade.

    `estoque` é o teto capturado quando a linha foi criada.
    `preco_original` só existe enquanto uma promoção reduz o preço.
    """

    produto_id: str
    nome: str
    preco: Decimal
    quantidade: int
    estoque: int
    preco_original: Optional[Decimal] = None
    categoria: str = ""
    imagem_url: str = ""

    @property
    def total(self) -> Decimal:
        return self.preco * self.quantidade

    def como_dict(self) -> dict:
        return {
            "produto_id": self.produto_id,
            "nome": self.nome,
            "preco": str(self.preco),
            "quantidade": self.quantidade,
            "estoque": self.estoque,
            "preco_original": (
                None if self.preco_original is None else str(self.preco_original)
            ),
            "categoria": self.categoria,
            "imagem_url": self.imagem_url,
        }

    @classmethod
    def de_dict(cls, dados: dict) -> "ItemCarrinho":
        preco_original = dados.get("preco_original")
        return cls(
            produto_id=str(dados["produto_id"]),
            nome=dados.get("nome", ""),
            preco=Decimal(str(dados["preco"])),
            quantidade=int(dados["quantidade"]),
            estoque=int(dados.get("estoque", 0)),
            preco_original=(
                None if preco_original is None else Decimal(str(preco_original))
            ),
            categoria=dados.get("categoria", ""),
            imagem_url=dados.get("imagem_url", ""),
        )


@dataclass
class Promocao:
    """
    Oferta devolvida pelo gerador de promoções.
    Sem `produto_id`/`percentual_desconto` é só uma mensagem.
    """

    mensagem: str
    produto_id: Optional[str] = None
    percentual_desconto: Optional[Decimal] = None

    @property
    def tem_desconto(self) -> bool:
        return bool(self.produto_id) and bool(self.percentual_desconto)

    def validar(self) -> None:
        """
        Percentual, quando informado, precisa estar em [0, 1).
        """
        if self.percentual_desconto is None:
            return
        if not (Decimal("0") <= Decimal(self.percentual_desconto) < Decimal("1")):
            raise PromocaoInvalidaError(percentual=self.percentual_desconto)

    def como_dict(self) -> dict:
        return {
            "mensagem": self.mensagem,
            "produto_id": self.produto_id,
            "percentual_desconto": (
                None
                if self.percentual_desconto is None
                else str(self.percentual_desconto)
            ),
        }

    @classmethod
    def de_dict(cls, dados: dict) -> "Promocao":
        percentual = dados.get("percentual_desconto")
        return cls(
            mensagem=dados.get("mensagem", ""),
            produto_id=dados.get("produto_id") or None,
            percentual_desconto=(
                None if percentual is None else Decimal(str(percentual))
            ),
        )


@dataclass
class Pedido:
    id: str
    cliente_id: str
    itens: List[ItemCarrinho]
    subtotal: Decimal
    impostos: Decimal
    total: Decimal
    criado_em: datetime
    promocao: Optional[Promocao] = None
    vendas_ids: List[str] = field(default_factory=list)
