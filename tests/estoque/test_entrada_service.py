from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from armazenamento.exceptions import RegistroNaoEncontradoError
from estoque.services.entrada_service import DadosEntrada, registrar_entrada
from estoque.services.repositorio_service import EntradaRepositorio
from produtos.services.repositorio_service import ProdutoRepositorio

pytestmark = pytest.mark.django_db


def test_registrar_entrada_soma_estoque(produto_factory):
    produto = produto_factory(nome="Geleia", estoque=5)

    entrada = registrar_entrada(
        DadosEntrada(
            produto_id=produto.id,
            fornecedor="Bananas do Vale",
            quantidade=12,
            preco_unitario=Decimal("4.25"),
        )
    )

    assert entrada.valor_total == Decimal("51.00")
    assert entrada.produto_nome == "Geleia"
    assert ProdutoRepositorio().obter_por_id(produto.id).estoque == 17
    assert [e.id for e in EntradaRepositorio().listar_por_produto(produto.id)] == [
        entrada.id
    ]


def test_entrada_de_produto_inexistente():
    with pytest.raises(RegistroNaoEncontradoError):
        registrar_entrada(
            DadosEntrada(
                produto_id="fantasma",
                fornecedor="X",
                quantidade=1,
                preco_unitario=Decimal("1.00"),
            )
        )

    assert EntradaRepositorio().listar() == []


def test_entrada_com_valor_invalido(produto_factory):
    produto = produto_factory()

    with pytest.raises(ValidationError):
        registrar_entrada(
            DadosEntrada(
                produto_id=produto.id,
                fornecedor="X",
                quantidade=1,
                preco_unitario=Decimal("0.00"),
            )
        )
