# financeiro/models/__init__.py

from .transacao_financeira_models import (
    CategoriaTransacao,
    FormaPagamento,
    StatusTransacao,
    TipoTransacao,
    TransacaoFinanceira,
)

__all__ = [
    "CategoriaTransacao",
    "FormaPagamento",
    "StatusTransacao",
    "TipoTransacao",
    "TransacaoFinanceira",
]
