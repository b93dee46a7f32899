# carrinho/models/__init__.py

from .espelho_sessao_models import EspelhoSessao

__all__ = [
    "EspelhoSessao",
]
