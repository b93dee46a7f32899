# fornecedores/views/fornecedor_views.py

from commons.views.repositorio_views import RepositorioViewSet
from fornecedores.serializers.fornecedor_serializers import FornecedorSerializer
from fornecedores.services.repositorio_service import FornecedorRepositorio


class FornecedorViewSet(RepositorioViewSet):
    serializer_class = FornecedorSerializer
    repositorio_class = FornecedorRepositorio
