# armazenamento/services/registros_service.py

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from django.db import IntegrityError, transaction

from armazenamento.colecoes import obter_modelo
from armazenamento.exceptions import ChaveDuplicadaError
from armazenamento.services.gerenciador_service import (
    GerenciadorArmazenamento,
    obter_gerenciador,
)

logger = logging.getLogger(__name__)


def _resolver(colecao: str, gerenciador: Optional[GerenciadorArmazenamento]):
    gerenciador = gerenciador or obter_gerenciador()
    gerenciador.garantir_aberto()
    return obter_modelo(colecao), gerenciador.alias


def _como_instancia(modelo, item):
    if isinstance(item, modelo):
        return item
    if isinstance(item, dict):
        return modelo(**item)
    raise TypeError(
        f"Item do tipo {type(item).__name__} não pertence a {modelo.__name__}."
    )


def obter_todos(
    colecao: str,
    *,
    ordenacao: Sequence[Any] = (),
    filtros: Optional[dict] = None,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> list:
    """
    Lista a coleção. `filtros` usa os índices secundários
    (ex.: {"produto_id": "P1"}).
    """
    modelo, alias = _resolver(colecao, gerenciador)
    with transaction.atomic(using=alias):
        qs = modelo.objects.using(alias).all()
        if filtros:
            qs = qs.filter(**filtros)
        if ordenacao:
            qs = qs.order_by(*ordenacao)
        return list(qs)


def obter_por_chave(
    colecao: str,
    chave,
    *,
    bloquear: bool = False,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
):
    """
    Retorna o registro ou None quando a chave não existe.

    bloquear=True trava a linha até o fim da transação externa
    (select_for_update); só faz sentido dentro de um transaction.atomic.
    """
    modelo, alias = _resolver(colecao, gerenciador)
    with transaction.atomic(using=alias):
        qs = modelo.objects.using(alias).filter(pk=chave)
        if bloquear:
            qs = qs.select_for_update()
        return qs.first()


def inserir(
    colecao: str,
    item,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
):
    """
    Insere um registro novo. Chave existente -> ChaveDuplicadaError.
    """
    modelo, alias = _resolver(colecao, gerenciador)
    instancia = _como_instancia(modelo, item)

    try:
        with transaction.atomic(using=alias):
            if instancia.pk is not None and (
                modelo.objects.using(alias).filter(pk=instancia.pk).exists()
            ):
                raise ChaveDuplicadaError(colecao, instancia.pk)
            instancia.save(using=alias, force_insert=True)
    except IntegrityError as exc:
        logger.warning(
            "Falha de integridade ao inserir. colecao=%s, chave=%s, erro=%s",
            colecao,
            instancia.pk,
            exc,
        )
        raise ChaveDuplicadaError(colecao, instancia.pk) from exc

    logger.debug("Registro inserido. colecao=%s, chave=%s", colecao, instancia.pk)
    return instancia


def salvar(
    colecao: str,
    item,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
):
    """
    Upsert: cria ou sobrescreve o registro com a mesma chave.
    """
    modelo, alias = _resolver(colecao, gerenciador)
    instancia = _como_instancia(modelo, item)

    with transaction.atomic(using=alias):
        existe = instancia.pk is not None and (
            modelo.objects.using(alias).filter(pk=instancia.pk).exists()
        )
        if existe:
            # instância montada fora do ORM (formulário/backup) com chave existente
            instancia._state.adding = False
            instancia.save(using=alias, force_update=True)
        else:
            instancia.save(using=alias, force_insert=True)

    logger.debug(
        "Registro salvo. colecao=%s, chave=%s, existia=%s", colecao, instancia.pk, existe
    )
    return instancia


def remover(
    colecao: str,
    chave,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> bool:
    """
    Remove pela chave. Chave inexistente é sucesso (no-op).
    Retorna True se algum registro foi removido.
    """
    modelo, alias = _resolver(colecao, gerenciador)
    with transaction.atomic(using=alias):
        removidos, _ = modelo.objects.using(alias).filter(pk=chave).delete()

    if not removidos:
        logger.debug("Remoção sem efeito. colecao=%s, chave=%s", colecao, chave)
    return bool(removidos)


def limpar(
    colecao: str,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> int:
    """
    Remove todos os registros da coleção. Retorna a quantidade removida.
    """
    modelo, alias = _resolver(colecao, gerenciador)
    with transaction.atomic(using=alias):
        removidos, _ = modelo.objects.using(alias).all().delete()

    logger.info("Coleção limpa. colecao=%s, removidos=%s", colecao, removidos)
    return removidos
