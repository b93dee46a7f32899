# conftest.py (na raiz do projeto)

import logging
from decimal import Decimal
from itertools import count

import pytest
from rest_framework.test import APIClient

from armazenamento.services.gerenciador_service import (
    GerenciadorArmazenamento,
    redefinir_gerenciador,
)
from clientes.services.repositorio_service import ClienteRepositorio
from financeiro.services.repositorio_service import TransacaoFinanceiraRepositorio
from fornecedores.services.repositorio_service import FornecedorRepositorio
from produtos.services.repositorio_service import ProdutoRepositorio

logger = logging.getLogger(__name__)

_sequencia = count(1)


# =============================================================================
# ARMAZENAMENTO
# =============================================================================

@pytest.fixture(autouse=True)
def _gerenciador_compartilhado_limpo():
    """
    Cada teste começa e termina sem gerenciador compartilhado aberto.
    """
    redefinir_gerenciador()
    yield
    redefinir_gerenciador()


@pytest.fixture
def gerenciador(db):
    g = GerenciadorArmazenamento().abrir()
    logger.info("[conftest] Gerenciador aberto. versao_schema=%s", g.versao_schema)
    yield g
    g.fechar()


# =============================================================================
# FACTORIES
# =============================================================================

@pytest.fixture
def produto_factory(db):
    def _criar(**kwargs):
        n = next(_sequencia)
        dados = {
            "nome": f"Doce de teste {n}",
            "descricao": "Produto criado em teste.",
            "preco": Decimal("10.00"),
            "estoque": 5,
            "categoria": "Doces em barra",
        }
        dados.update(kwargs)
        return ProdutoRepositorio().adicionar(dados)

    return _criar


@pytest.fixture
def cliente_factory(db):
    def _criar(**kwargs):
        n = next(_sequencia)
        dados = {
            "razao_social": f"Cliente Teste {n} LTDA",
            "nome_fantasia": f"Cliente {n}",
            "cidade": "Corupá",
        }
        dados.update(kwargs)
        return ClienteRepositorio().adicionar(dados)

    return _criar


@pytest.fixture
def fornecedor_factory(db):
    def _criar(**kwargs):
        n = next(_sequencia)
        dados = {"nome": f"Fornecedor {n}", "cidade": "Jaraguá do Sul"}
        dados.update(kwargs)
        return FornecedorRepositorio().adicionar(dados)

    return _criar


@pytest.fixture
def transacao_factory(db):
    def _criar(**kwargs):
        dados = {
            "tipo": "Entrada",
            "origem_destino": "Balcão",
            "descricao": "Venda do dia",
            "valor": Decimal("100.00"),
            "categoria": "Venda",
            "forma_pagamento": "Pix",
            "status": "Pago",
        }
        dados.update(kwargs)
        return TransacaoFinanceiraRepositorio().adicionar(dados)

    return _criar


# =============================================================================
# HTTP
# =============================================================================

@pytest.fixture
def api_client():
    return APIClient()
