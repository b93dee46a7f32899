# carrinho/services/espelho_service.py

from __future__ import annotations

import logging
from typing import Any

from armazenamento.services import registros_service as registros
from armazenamento.services.repositorio_base import RepositorioBase

logger = logging.getLogger(__name__)

CHAVE_ITENS = "carrinho_itens"
CHAVE_PROMOCAO = "carrinho_promocao"


class EspelhoSessaoRepositorio(RepositorioBase):
    """
    Valores JSON independentes por chave. Gravar sobrescreve o valor inteiro;
    dois processos gravando a mesma chave: vence a última escrita.
    """

    colecao = "espelho_sessao"
    ordenacao = ("chave",)

    def ler(self, chave: str, padrao: Any = None) -> Any:
        registro = self.buscar(chave)
        if registro is None:
            return padrao
        return registro.valor

    def gravar(self, chave: str, valor: Any) -> None:
        registros.salvar(
            self.colecao,
            {"chave": chave, "valor": valor},
            gerenciador=self.gerenciador,
        )
        logger.debug("Espelho gravado. chave=%s", chave)

    def apagar(self, chave: str) -> bool:
        return registros.remover(self.colecao, chave, gerenciador=self.gerenciador)
