# estoque/views/entrada_views.py

import logging

from rest_framework import permissions, serializers, status
from rest_framework.response import Response
from rest_framework.views import APIView

from commons.views.repositorio_views import RepositorioViewSet
from estoque.serializers.entrada_serializers import (
    EntradaSerializer,
    RegistrarEntradaSerializer,
)
from estoque.services.entrada_service import registrar_entrada
from estoque.services.repositorio_service import EntradaRepositorio
from produtos.serializers.produto_serializers import ProdutoSerializer
from produtos.services.repositorio_service import ProdutoRepositorio

logger = logging.getLogger(__name__)


class EntradaViewSet(RepositorioViewSet):
    """
    Entradas de mercadoria. POST soma a quantidade ao estoque do produto.
    Editar/excluir uma entrada não mexe no estoque.
    """

    serializer_class = EntradaSerializer
    repositorio_class = EntradaRepositorio

    def get_serializer_class(self):
        if self.action == "create":
            return RegistrarEntradaSerializer
        return EntradaSerializer

    def create(self, request, *args, **kwargs):
        serializer = RegistrarEntradaSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        entrada = registrar_entrada(serializer.para_dados())
        return Response(
            EntradaSerializer(entrada).data, status=status.HTTP_201_CREATED
        )


class EstoqueBaixoView(APIView):
    """
    Produtos com estoque abaixo do limite (?limite=N, padrão das settings).
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        limite = request.query_params.get("limite")
        if limite is not None:
            try:
                limite = int(limite)
            except ValueError:
                raise serializers.ValidationError({"limite": "Informe um número inteiro."})

        produtos = ProdutoRepositorio().listar_estoque_baixo(limite)
        logger.info(
            "HTTP: estoque baixo consultado. limite=%s, produtos=%s",
            limite,
            len(produtos),
        )
        return Response(ProdutoSerializer(produtos, many=True).data)
