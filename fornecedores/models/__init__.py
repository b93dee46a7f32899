# fornecedores/models/__init__.py

from .fornecedor_models import Fornecedor

__all__ = [
    "Fornecedor",
]
