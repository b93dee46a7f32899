# backup/views/backup_views.py

import logging

from django.http import HttpResponse
from rest_framework import permissions, status
from rest_framework.parsers import JSONParser, MultiPartParser
from rest_framework.response import Response
from rest_framework.views import APIView

from backup.services.backup_service import (
    carregar_backup,
    exportar,
    nome_arquivo_backup,
    restaurar,
    serializar_backup,
)

logger = logging.getLogger(__name__)


class ExportarBackupView(APIView):
    """
    Baixa o backup completo como arquivo JSON.
    """

    permission_classes = [permissions.AllowAny]

    def get(self, request, *args, **kwargs):
        conteudo = serializar_backup(exportar())
        nome = nome_arquivo_backup()

        logger.info("HTTP: backup exportado. arquivo=%s", nome)
        resposta = HttpResponse(conteudo, content_type="application/json; charset=utf-8")
        resposta["Content-Disposition"] = f'attachment; filename="{nome}"'
        return resposta


class RestaurarBackupView(APIView):
    """
    Restaura a partir de um arquivo (multipart, campo `arquivo`)
    ou do documento JSON no corpo da requisição.

    Substitui as coleções presentes no arquivo. Irreversível: a confirmação
    fica a cargo do cliente.
    """

    permission_classes = [permissions.AllowAny]
    parser_classes = [JSONParser, MultiPartParser]

    def post(self, request, *args, **kwargs):
        arquivo = request.FILES.get("arquivo")
        documento = arquivo.read() if arquivo is not None else request.data

        dados = carregar_backup(documento)
        restauradas = restaurar(dados)

        logger.info(
            "HTTP: backup restaurado. arquivo=%s, colecoes=%s",
            getattr(arquivo, "name", None),
            restauradas,
        )
        return Response(
            {
                "detail": "Dados restaurados com sucesso.",
                "restauradas": restauradas,
            },
            status=status.HTTP_200_OK,
        )
