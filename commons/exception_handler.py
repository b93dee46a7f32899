# commons/exception_handler.py

import logging

from django.core.exceptions import ValidationError as DjangoValidationError
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from armazenamento.exceptions import (
    ArmazenamentoError,
    ArmazenamentoIndisponivelError,
    ChaveDuplicadaError,
    ColecaoDesconhecidaError,
    ConflitoVersaoSchemaError,
    MigracaoDestrutivaError,
    RegistroNaoEncontradoError,
)
from backup.services.exceptions import (
    BackupError,
    BackupInvalidoError,
    FalhaRestauracaoError,
)
from carrinho.services.exceptions import (
    CarrinhoError,
    CarrinhoVazioError,
    PromocaoInvalidaError,
)
from vendas.services.exceptions import EstoqueInsuficienteError, VendaError

logger = logging.getLogger(__name__)

# (classe, status HTTP, código). Primeira correspondência vence.
MAPA_ERROS = (
    (ArmazenamentoIndisponivelError, status.HTTP_503_SERVICE_UNAVAILABLE, "armazenamento_indisponivel"),
    (ConflitoVersaoSchemaError, status.HTTP_409_CONFLICT, "conflito_versao_schema"),
    (ChaveDuplicadaError, status.HTTP_409_CONFLICT, "chave_duplicada"),
    (RegistroNaoEncontradoError, status.HTTP_404_NOT_FOUND, "registro_nao_encontrado"),
    (EstoqueInsuficienteError, status.HTTP_422_UNPROCESSABLE_ENTITY, "estoque_insuficiente"),
    (FalhaRestauracaoError, status.HTTP_500_INTERNAL_SERVER_ERROR, "falha_restauracao"),
    (BackupInvalidoError, status.HTTP_400_BAD_REQUEST, "backup_invalido"),
    (PromocaoInvalidaError, status.HTTP_400_BAD_REQUEST, "promocao_invalida"),
    (CarrinhoVazioError, status.HTTP_400_BAD_REQUEST, "carrinho_vazio"),
    (MigracaoDestrutivaError, status.HTTP_500_INTERNAL_SERVER_ERROR, "migracao_destrutiva"),
    (ColecaoDesconhecidaError, status.HTTP_500_INTERNAL_SERVER_ERROR, "colecao_desconhecida"),
    (ArmazenamentoError, status.HTTP_500_INTERNAL_SERVER_ERROR, "erro_armazenamento"),
    (VendaError, status.HTTP_400_BAD_REQUEST, "erro_venda"),
    (BackupError, status.HTTP_500_INTERNAL_SERVER_ERROR, "erro_backup"),
    (CarrinhoError, status.HTTP_400_BAD_REQUEST, "erro_carrinho"),
)


def tratar_excecao(exc, context):
    """
    Handler do DRF: traduz os erros de domínio para
    {"code": ..., "detail": ...} com o status correspondente.
    Demais exceções seguem o handler padrão.
    """
    if isinstance(exc, DjangoValidationError):
        logger.warning("Erro de validação. erro=%s", exc.messages)
        return Response(
            {"code": "erro_validacao", "detail": exc.messages},
            status=status.HTTP_400_BAD_REQUEST,
        )

    for classe, status_http, codigo in MAPA_ERROS:
        if isinstance(exc, classe):
            corpo = {"code": codigo, "detail": exc.mensagem}
            if isinstance(exc, FalhaRestauracaoError):
                corpo.update(
                    colecao=exc.colecao,
                    concluidas=exc.concluidas,
                    revertida=exc.revertida,
                )
            if isinstance(exc, EstoqueInsuficienteError):
                corpo.update(disponivel=exc.disponivel, solicitado=exc.solicitado)

            nivel = logging.ERROR if status_http >= 500 else logging.WARNING
            logger.log(
                nivel,
                "Erro de domínio na API. code=%s, status=%s, erro=%s",
                codigo,
                status_http,
                exc.mensagem,
            )
            return Response(corpo, status=status_http)

    return exception_handler(exc, context)
