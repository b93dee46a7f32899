# vendas/views/venda_views.py

import logging

from rest_framework import status
from rest_framework.response import Response

from commons.views.repositorio_views import RepositorioViewSet
from vendas.serializers.venda_serializers import (
    RegistrarVendaSerializer,
    VendaSerializer,
)
from vendas.services.repositorio_service import VendaRepositorio
from vendas.services.venda_service import criar_venda, excluir_venda

logger = logging.getLogger(__name__)


class VendaViewSet(RepositorioViewSet):
    """
    Saídas (vendas).

    - POST: registra a venda e baixa o estoque (criar_venda).
      Estoque insuficiente -> 422.
    - DELETE: exclui e devolve o estoque (excluir_venda). Venda inexistente
      também responde 204.
    - Venda não é editável: sem PUT/PATCH.
    """

    serializer_class = VendaSerializer
    repositorio_class = VendaRepositorio
    http_method_names = ["get", "post", "delete", "head", "options"]

    def get_serializer_class(self):
        if self.action == "create":
            return RegistrarVendaSerializer
        return VendaSerializer

    def create(self, request, *args, **kwargs):
        serializer = RegistrarVendaSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        logger.info(
            "HTTP: registrar venda. produto_id=%s, cliente_id=%s, qtd=%s",
            serializer.validated_data["produto_id"],
            serializer.validated_data["cliente_id"],
            serializer.validated_data["quantidade"],
        )
        venda = criar_venda(serializer.para_dados())
        return Response(VendaSerializer(venda).data, status=status.HTTP_201_CREATED)

    def destroy(self, request, pk=None, *args, **kwargs):
        excluir_venda(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)
