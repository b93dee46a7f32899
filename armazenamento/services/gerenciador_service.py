# armazenamento/services/gerenciador_service.py

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Iterable, Optional

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.db import DEFAULT_DB_ALIAS, DatabaseError, connections
from django.db.migrations import operations
from django.db.migrations.executor import MigrationExecutor
from django.utils.connection import ConnectionDoesNotExist

from armazenamento.exceptions import (
    ArmazenamentoIndisponivelError,
    ConflitoVersaoSchemaError,
    MigracaoDestrutivaError,
)

logger = logging.getLogger(__name__)


# Migrações do armazenamento só podem criar coleções, índices ou campos novos.
OPERACOES_ADITIVAS = (
    operations.CreateModel,
    operations.AddIndex,
    operations.AddField,
)


def validar_migracao_aditiva(migracao) -> None:
    """
    Garante que uma migração não destrói registros existentes.
    """
    for operacao in migracao.operations:
        if not isinstance(operacao, OPERACOES_ADITIVAS):
            raise MigracaoDestrutivaError(
                f"Migração {migracao.app_label}.{migracao.name} contém operação "
                f"não aditiva: {type(operacao).__name__}.",
                migracao=f"{migracao.app_label}.{migracao.name}",
                operacao=type(operacao).__name__,
            )


class GerenciadorArmazenamento:
    """
    Handle único para o armazenamento local (um alias de banco do Django).

    Ciclo de vida explícito e com contagem de referências:
    - abrir(): na primeira abertura verifica a disponibilidade do banco e
      leva o schema até a versão alvo, aplicando as migrações pendentes
      das apps do armazenamento, em ordem.
    - fechar(): a última referência fecha a conexão.

    Versão do schema = quantidade de migrações aplicadas das apps do
    armazenamento. Se o banco tiver migrações que este código não conhece
    (outro processo abriu com schema mais novo), a conexão é liberada e
    ConflitoVersaoSchemaError é levantado.
    """

    def __init__(
        self,
        alias: str = DEFAULT_DB_ALIAS,
        apps_armazenamento: Optional[Iterable[str]] = None,
    ):
        self.alias = alias
        if apps_armazenamento is None:
            apps_armazenamento = getattr(settings, "APPS_ARMAZENAMENTO", ())
        self.apps_armazenamento = tuple(apps_armazenamento)
        self._referencias = 0
        self._aberto = False
        self._versao_schema: Optional[int] = None
        self._versao_alvo: Optional[int] = None
        self._lock = threading.RLock()

    def __repr__(self) -> str:
        return (
            f"<GerenciadorArmazenamento alias={self.alias} aberto={self._aberto} "
            f"referencias={self._referencias} versao={self._versao_schema}>"
        )

    # ------------------------------------------------------------------
    # Ciclo de vida
    # ------------------------------------------------------------------
    @property
    def aberto(self) -> bool:
        return self._aberto

    @property
    def referencias(self) -> int:
        return self._referencias

    @property
    def versao_schema(self) -> Optional[int]:
        return self._versao_schema

    @property
    def versao_alvo(self) -> Optional[int]:
        return self._versao_alvo

    def abrir(self) -> "GerenciadorArmazenamento":
        with self._lock:
            if not self._aberto:
                conexao = self._conectar()
                try:
                    self._migrar(conexao)
                except ConflitoVersaoSchemaError:
                    self._liberar(conexao)
                    raise
                self._aberto = True
                logger.info(
                    "Armazenamento aberto. alias=%s, versao_schema=%s",
                    self.alias,
                    self._versao_schema,
                )
            self._referencias += 1
        return self

    def fechar(self) -> None:
        with self._lock:
            if self._referencias == 0:
                return
            self._referencias -= 1
            if self._referencias > 0:
                return
            self._aberto = False
            self._liberar(connections[self.alias])
            logger.info("Armazenamento fechado. alias=%s", self.alias)

    def garantir_aberto(self) -> "GerenciadorArmazenamento":
        """
        Abre sob demanda (uso preguiçoso pelos repositórios).
        """
        if not self._aberto:
            self.abrir()
        return self

    @property
    def conexao(self):
        self.garantir_aberto()
        return connections[self.alias]

    def __enter__(self) -> "GerenciadorArmazenamento":
        return self.abrir()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.fechar()

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _conectar(self):
        try:
            conexao = connections[self.alias]
            self._preparar_diretorio(conexao.settings_dict)
            conexao.ensure_connection()
        except (ConnectionDoesNotExist, ImproperlyConfigured, DatabaseError, OSError) as exc:
            logger.error(
                "Armazenamento indisponível. alias=%s, erro=%s", self.alias, exc
            )
            raise ArmazenamentoIndisponivelError(
                f"Armazenamento local indisponível (alias '{self.alias}'): {exc}",
                causa=exc,
            ) from exc
        return conexao

    @staticmethod
    def _preparar_diretorio(settings_dict) -> None:
        # SQLite não cria o diretório do arquivo.
        if "sqlite3" not in settings_dict.get("ENGINE", ""):
            return
        nome = str(settings_dict.get("NAME") or "")
        if not nome or nome == ":memory:" or nome.startswith("file:"):
            return
        Path(nome).parent.mkdir(parents=True, exist_ok=True)

    def _migrar(self, conexao) -> None:
        executor = MigrationExecutor(conexao)
        loader = executor.loader

        conhecidas = {
            no for no in loader.graph.nodes if no[0] in self.apps_armazenamento
        }
        aplicadas = {
            no for no in loader.applied_migrations if no[0] in self.apps_armazenamento
        }

        desconhecidas = aplicadas - conhecidas
        if desconhecidas:
            logger.warning(
                "Conflito de versão do schema. alias=%s, migracoes_desconhecidas=%s",
                self.alias,
                sorted(desconhecidas),
            )
            raise ConflitoVersaoSchemaError(migracoes_desconhecidas=desconhecidas)

        alvos = [
            no for no in loader.graph.leaf_nodes() if no[0] in self.apps_armazenamento
        ]
        plano = executor.migration_plan(alvos)

        for migracao, reverter in plano:
            if reverter:
                raise MigracaoDestrutivaError(
                    f"Plano exige reverter {migracao.app_label}.{migracao.name}.",
                    migracao=f"{migracao.app_label}.{migracao.name}",
                )
            if migracao.app_label in self.apps_armazenamento:
                validar_migracao_aditiva(migracao)

        if plano:
            logger.info(
                "Atualizando schema do armazenamento. alias=%s, de=%s, para=%s, passos=%s",
                self.alias,
                len(aplicadas),
                len(conhecidas),
                [f"{m.app_label}.{m.name}" for m, _ in plano],
            )
            executor.migrate(alvos, plan=plano)

        self._versao_schema = len(aplicadas) + sum(
            1 for m, _ in plano if m.app_label in self.apps_armazenamento
        )
        self._versao_alvo = len(conhecidas)

    def _liberar(self, conexao) -> None:
        if conexao.in_atomic_block:
            # fechar dentro de transação invalidaria o bloco atual
            logger.debug(
                "Conexão mantida: transação em andamento. alias=%s", self.alias
            )
            return
        conexao.close()


_gerenciador: Optional[GerenciadorArmazenamento] = None
_gerenciador_lock = threading.Lock()


def obter_gerenciador() -> GerenciadorArmazenamento:
    """
    Retorna o gerenciador compartilhado do processo (criado sob demanda).
    """
    global _gerenciador
    with _gerenciador_lock:
        if _gerenciador is None:
            _gerenciador = GerenciadorArmazenamento()
        return _gerenciador


def redefinir_gerenciador() -> None:
    """
    Descarta o gerenciador compartilhado (ex.: após conflito de versão,
    para que a próxima chamada reabra com o schema atual).
    """
    global _gerenciador
    with _gerenciador_lock:
        if _gerenciador is not None:
            while _gerenciador.referencias:
                _gerenciador.fechar()
        _gerenciador = None
