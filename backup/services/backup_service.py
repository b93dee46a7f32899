# backup/services/backup_service.py

from __future__ import annotations

import json
import logging
from datetime import date
from typing import Optional, Union

from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.db import models, transaction
from django.utils import timezone

from armazenamento.services import registros_service as registros
from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from backup.services.dto import COLECOES_BACKUP, DadosBackup
from backup.services.exceptions import BackupInvalidoError, FalhaRestauracaoError
from clientes.serializers.cliente_serializers import ClienteSerializer
from clientes.services.repositorio_service import ClienteRepositorio
from estoque.serializers.entrada_serializers import EntradaSerializer
from estoque.services.repositorio_service import EntradaRepositorio
from financeiro.serializers.transacao_financeira_serializers import (
    TransacaoFinanceiraSerializer,
)
from financeiro.services.repositorio_service import TransacaoFinanceiraRepositorio
from fornecedores.serializers.fornecedor_serializers import FornecedorSerializer
from fornecedores.services.repositorio_service import FornecedorRepositorio
from produtos.serializers.produto_serializers import ProdutoSerializer
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.serializers.venda_serializers import VendaSerializer
from vendas.services.repositorio_service import VendaRepositorio

logger = logging.getLogger(__name__)

REPOSITORIOS = {
    "produtos": ProdutoRepositorio,
    "entradas": EntradaRepositorio,
    "vendas": VendaRepositorio,
    "clientes": ClienteRepositorio,
    "fornecedores": FornecedorRepositorio,
    "transacoes_financeiras": TransacaoFinanceiraRepositorio,
}

SERIALIZERS = {
    "produtos": ProdutoSerializer,
    "entradas": EntradaSerializer,
    "vendas": VendaSerializer,
    "clientes": ClienteSerializer,
    "fornecedores": FornecedorSerializer,
    "transacoes_financeiras": TransacaoFinanceiraSerializer,
}

# Campos calculados pelos serializers que não existem no modelo.
CAMPOS_SOMENTE_LEITURA = {
    "produtos": ("em_estoque",),
    "clientes": ("nome_exibicao",),
}


def exportar(*, gerenciador: Optional[GerenciadorArmazenamento] = None) -> DadosBackup:
    """
    Lê todas as coleções numa única transação de leitura.
    """
    dados = DadosBackup()
    alias = ProdutoRepositorio(gerenciador).alias

    with transaction.atomic(using=alias):
        for colecao in COLECOES_BACKUP:
            setattr(dados, colecao, REPOSITORIOS[colecao](gerenciador).listar())

    logger.info(
        "Backup exportado. %s",
        ", ".join(f"{c}={len(getattr(dados, c))}" for c in COLECOES_BACKUP),
    )
    return dados


def _registro_documento(colecao: str, registro) -> dict:
    if isinstance(registro, models.Model):
        documento = dict(SERIALIZERS[colecao](registro).data)
        for campo in CAMPOS_SOMENTE_LEITURA.get(colecao, ()):
            documento.pop(campo, None)
        return documento
    return dict(registro)


def serializar_backup(dados: DadosBackup) -> str:
    """
    Documento JSON: um array por coleção presente, datas em ISO-8601,
    valores monetários como string.
    """
    documento = {
        colecao: [_registro_documento(colecao, r) for r in getattr(dados, colecao)]
        for colecao in dados.colecoes_presentes()
    }
    return json.dumps(documento, cls=DjangoJSONEncoder, ensure_ascii=False, indent=2)


def nome_arquivo_backup(data: Optional[date] = None) -> str:
    data = data or timezone.localdate()
    prefixo = getattr(settings, "PREFIXO_ARQUIVO_BACKUP", "controle_doces_backup")
    return f"{prefixo}_{data:%Y-%m-%d}.json"


def carregar_backup(documento: Union[bytes, str, dict]) -> DadosBackup:
    """
    Lê e valida um documento de backup.

    Inválido quando: não é um objeto JSON, não tem nenhuma coleção
    conhecida, ou uma coleção conhecida não é um array de objetos.
    Chaves desconhecidas são ignoradas.
    """
    if isinstance(documento, (bytes, bytearray)):
        try:
            documento = documento.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise BackupInvalidoError(
                "Arquivo de backup não está em UTF-8."
            ) from exc

    if isinstance(documento, str):
        try:
            documento = json.loads(documento)
        except json.JSONDecodeError as exc:
            raise BackupInvalidoError(
                f"Arquivo de backup não é um JSON válido: {exc.msg}."
            ) from exc

    if not isinstance(documento, dict):
        raise BackupInvalidoError(
            "Arquivo de backup inválido: o conteúdo deve ser um objeto JSON."
        )

    presentes = [c for c in COLECOES_BACKUP if c in documento]
    if not presentes:
        raise BackupInvalidoError(
            "Arquivo de backup inválido: nenhuma coleção reconhecida."
        )

    dados = DadosBackup()
    for colecao in presentes:
        registros_colecao = documento[colecao]
        if not isinstance(registros_colecao, list):
            raise BackupInvalidoError(
                f"Arquivo de backup inválido: '{colecao}' deve ser uma lista."
            )
        if not all(isinstance(r, dict) for r in registros_colecao):
            raise BackupInvalidoError(
                f"Arquivo de backup inválido: '{colecao}' deve conter apenas objetos."
            )
        setattr(dados, colecao, registros_colecao)

    logger.info("Backup carregado. colecoes=%s", presentes)
    return dados


def restaurar(
    dados: DadosBackup,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> list:
    """
    Substitui o conteúdo de cada coleção presente no backup, na ordem fixa
    de COLECOES_BACKUP. Coleções ausentes não são tocadas.

    Tudo roda numa transação externa com um savepoint por coleção: uma falha
    levanta FalhaRestauracaoError e nada do que foi restaurado fica gravado.
    Retorna as coleções restauradas.
    """
    alias = ProdutoRepositorio(gerenciador).alias
    concluidas: list = []

    with transaction.atomic(using=alias):
        for colecao in COLECOES_BACKUP:
            registros_colecao = getattr(dados, colecao)
            if registros_colecao is None:
                continue

            repositorio = REPOSITORIOS[colecao](gerenciador)
            try:
                with transaction.atomic(using=alias):
                    registros.limpar(colecao, gerenciador=gerenciador)
                    for registro in registros_colecao:
                        if isinstance(registro, dict):
                            registro = {
                                k: v
                                for k, v in registro.items()
                                if k not in CAMPOS_SOMENTE_LEITURA.get(colecao, ())
                            }
                        registros.inserir(
                            colecao,
                            repositorio.preparar(registro),
                            gerenciador=gerenciador,
                        )
            except Exception as exc:
                logger.error(
                    "Falha na restauração. colecao=%s, concluidas=%s, erro=%s",
                    colecao,
                    concluidas,
                    exc,
                )
                raise FalhaRestauracaoError(
                    colecao=colecao, concluidas=concluidas, causa=exc
                ) from exc

            concluidas.append(colecao)
            logger.info(
                "Coleção restaurada. colecao=%s, registros=%s",
                colecao,
                len(registros_colecao),
            )

    logger.info("Restauração concluída. colecoes=%s", concluidas)
    return concluidas
