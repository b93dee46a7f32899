# produtos/services/repositorio_service.py

from __future__ import annotations

import logging
from typing import Optional

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction

from armazenamento.services import registros_service as registros
from armazenamento.services.repositorio_base import RepositorioBase
from produtos.catalogo_inicial import PRODUTOS_INICIAIS

logger = logging.getLogger(__name__)


class ProdutoRepositorio(RepositorioBase):
    colecao = "produtos"
    ordenacao = ("nome", "id")

    def semear_catalogo_inicial(self) -> int:
        """
        Grava o catálogo inicial se a coleção de produtos estiver vazia.
        Retorna quantos produtos foram gravados (0 se já havia produtos).
        """
        if registros.obter_todos(self.colecao, gerenciador=self.gerenciador):
            return 0

        with transaction.atomic(using=self.alias):
            for dados in PRODUTOS_INICIAIS:
                self.adicionar(dict(dados))

        logger.info("Catálogo inicial gravado. produtos=%s", len(PRODUTOS_INICIAIS))
        return len(PRODUTOS_INICIAIS)

    def ajustar_estoque(self, produto, delta: int):
        """
        Soma `delta` ao estoque do produto e grava. Estoque nunca fica negativo.
        """
        novo_estoque = produto.estoque + delta
        if novo_estoque < 0:
            raise ValidationError(
                f"Estoque do produto {produto.id} não pode ficar negativo "
                f"(atual={produto.estoque}, ajuste={delta})."
            )

        logger.info(
            "Ajustando estoque. produto_id=%s, estoque_anterior=%s, ajuste=%s, estoque_novo=%s",
            produto.id,
            produto.estoque,
            delta,
            novo_estoque,
        )
        produto.estoque = novo_estoque
        return self.atualizar(produto)

    def listar_em_estoque(self) -> list:
        return [p for p in self.listar() if p.estoque > 0]

    def listar_estoque_baixo(self, limite: Optional[int] = None) -> list:
        """
        Produtos com estoque abaixo do limite (inclui os zerados),
        do menor para o maior estoque.
        """
        if limite is None:
            limite = getattr(settings, "LIMITE_ESTOQUE_BAIXO", 10)
        baixos = [p for p in self.listar() if p.estoque < limite]
        return sorted(baixos, key=lambda p: (p.estoque, p.nome))
