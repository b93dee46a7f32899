# produtos/views/produto_views.py

from commons.views.repositorio_views import RepositorioViewSet
from produtos.serializers.produto_serializers import ProdutoSerializer
from produtos.services.repositorio_service import ProdutoRepositorio


class ProdutoViewSet(RepositorioViewSet):
    """
    CRUD do catálogo. Estoque também muda por vendas e entradas,
    que passam pelos respectivos serviços.
    """

    serializer_class = ProdutoSerializer
    repositorio_class = ProdutoRepositorio
