# financeiro/views/transacao_financeira_views.py

from rest_framework import permissions
from rest_framework.response import Response
from rest_framework.views import APIView

from commons.views.repositorio_views import RepositorioViewSet
from financeiro.serializers.transacao_financeira_serializers import (
    FiltroResumoSerializer,
    ResumoFinanceiroSerializer,
    TransacaoFinanceiraSerializer,
)
from financeiro.services.repositorio_service import TransacaoFinanceiraRepositorio
from financeiro.services.resumo_service import resumir


class TransacaoFinanceiraViewSet(RepositorioViewSet):
    serializer_class = TransacaoFinanceiraSerializer
    repositorio_class = TransacaoFinanceiraRepositorio


class ResumoFinanceiroView(APIView):
    """
    Totais do livro-caixa com filtros opcionais:
    ?inicio=AAAA-MM-DD&fim=AAAA-MM-DD&tipo=...&categoria=...&status=...
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        filtros = FiltroResumoSerializer(data=request.query_params)
        filtros.is_valid(raise_exception=True)

        transacoes = TransacaoFinanceiraRepositorio().listar()
        resumo = resumir(transacoes, **filtros.validated_data)
        return Response(ResumoFinanceiroSerializer(resumo).data)
