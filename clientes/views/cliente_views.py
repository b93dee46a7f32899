# clientes/views/cliente_views.py

from clientes.serializers.cliente_serializers import ClienteSerializer
from clientes.services.repositorio_service import ClienteRepositorio
from commons.views.repositorio_views import RepositorioViewSet


class ClienteViewSet(RepositorioViewSet):
    serializer_class = ClienteSerializer
    repositorio_class = ClienteRepositorio
