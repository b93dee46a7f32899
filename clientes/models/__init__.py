# clientes/models/__init__.py

from .cliente_models import Cliente

__all__ = [
    "Cliente",
]
