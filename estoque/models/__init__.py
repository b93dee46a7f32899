# estoque/models/__init__.py

from .entrada_models import Entrada

__all__ = [
    "Entrada",
]
