# armazenamento/services/repositorio_base.py

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

from armazenamento.colecoes import campos_data, obter_modelo
from armazenamento.datas import normalizar_campos_data
from armazenamento.exceptions import RegistroNaoEncontradoError
from armazenamento.services import registros_service as registros
from armazenamento.services.gerenciador_service import (
    GerenciadorArmazenamento,
    obter_gerenciador,
)

logger = logging.getLogger(__name__)


class RepositorioBase:
    """
    Fachada tipada sobre uma coleção do armazenamento.

    Acrescenta ao acesso genérico:
    - reidratação dos campos de data (strings ISO -> datetime) em toda
      leitura e antes de toda escrita;
    - ordenação padrão da coleção (`ordenacao`).

    Não valida os dados: os formulários (serializers) já validaram.
    """

    colecao: str = ""
    ordenacao: Sequence[Any] = ()

    def __init__(self, gerenciador: Optional[GerenciadorArmazenamento] = None):
        self.gerenciador = gerenciador

    @property
    def modelo(self):
        return obter_modelo(self.colecao)

    @property
    def alias(self) -> str:
        # abre antes de qualquer transaction.atomic do chamador
        return (self.gerenciador or obter_gerenciador()).garantir_aberto().alias

    def _reidratar(self, item):
        return normalizar_campos_data(item, campos_data(self.colecao))

    def preparar(self, item):
        if isinstance(item, dict):
            item = self.modelo(**item)
        return self._reidratar(item)

    # ------------------------------------------------------------------
    # Operações
    # ------------------------------------------------------------------
    def listar(self, **filtros) -> list:
        itens = registros.obter_todos(
            self.colecao,
            ordenacao=self.ordenacao,
            filtros=filtros or None,
            gerenciador=self.gerenciador,
        )
        return [self._reidratar(item) for item in itens]

    def buscar(self, id, *, bloquear: bool = False):
        """
        Como obter_por_id, mas devolve None para id inexistente.
        """
        item = registros.obter_por_chave(
            self.colecao, id, bloquear=bloquear, gerenciador=self.gerenciador
        )
        if item is None:
            return None
        return self._reidratar(item)

    def obter_por_id(self, id, *, bloquear: bool = False):
        item = self.buscar(id, bloquear=bloquear)
        if item is None:
            raise RegistroNaoEncontradoError(self.colecao, id)
        return item

    def adicionar(self, item):
        instancia = registros.inserir(
            self.colecao, self.preparar(item), gerenciador=self.gerenciador
        )
        logger.info(
            "Registro adicionado. colecao=%s, id=%s", self.colecao, instancia.pk
        )
        return instancia

    def atualizar(self, item):
        instancia = self.preparar(item)
        if registros.obter_por_chave(
            self.colecao, instancia.pk, gerenciador=self.gerenciador
        ) is None:
            raise RegistroNaoEncontradoError(self.colecao, instancia.pk)

        instancia = registros.salvar(self.colecao, instancia, gerenciador=self.gerenciador)
        logger.info(
            "Registro atualizado. colecao=%s, id=%s", self.colecao, instancia.pk
        )
        return instancia

    def remover(self, id) -> bool:
        removido = registros.remover(self.colecao, id, gerenciador=self.gerenciador)
        logger.info(
            "Remoção solicitada. colecao=%s, id=%s, removido=%s",
            self.colecao,
            id,
            removido,
        )
        return removido
