# vendas/models/__init__.py

from .venda_models import Venda

__all__ = [
    "Venda",
]
