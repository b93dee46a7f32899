from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from produtos.catalogo_inicial import PRODUTOS_INICIAIS
from produtos.services.repositorio_service import ProdutoRepositorio

pytestmark = pytest.mark.django_db


def test_semear_catalogo_inicial_so_quando_vazio():
    repo = ProdutoRepositorio()

    assert repo.semear_catalogo_inicial() == len(PRODUTOS_INICIAIS)
    assert repo.semear_catalogo_inicial() == 0

    ids = {p.id for p in repo.listar()}
    assert ids == {"1", "2", "3", "4"}


def test_semear_nao_mexe_em_catalogo_existente(produto_factory):
    produto_factory(nome="Único")

    assert ProdutoRepositorio().semear_catalogo_inicial() == 0
    assert len(ProdutoRepositorio().listar()) == 1


def test_produtos_ordenados_por_nome(produto_factory):
    produto_factory(nome="Geleia")
    produto_factory(nome="Bananinha")
    produto_factory(nome="Doce de Leite")

    assert [p.nome for p in ProdutoRepositorio().listar()] == [
        "Bananinha",
        "Doce de Leite",
        "Geleia",
    ]


def test_ajustar_estoque_soma_delta(produto_factory):
    produto = produto_factory(estoque=5)
    repo = ProdutoRepositorio()

    repo.ajustar_estoque(produto, 3)

    assert repo.obter_por_id(produto.id).estoque == 8


def test_ajustar_estoque_nunca_fica_negativo(produto_factory):
    produto = produto_factory(estoque=2)
    repo = ProdutoRepositorio()

    with pytest.raises(ValidationError):
        repo.ajustar_estoque(produto, -3)

    assert repo.obter_por_id(produto.id).estoque == 2


def test_listar_estoque_baixo_do_menor_para_o_maior(produto_factory):
    produto_factory(nome="Cheio", estoque=50)
    produto_factory(nome="Quase", estoque=9)
    produto_factory(nome="Zerado", estoque=0)
    produto_factory(nome="No limite", estoque=10)

    baixos = ProdutoRepositorio().listar_estoque_baixo()

    assert [p.nome for p in baixos] == ["Zerado", "Quase"]


def test_listar_estoque_baixo_com_limite_customizado(produto_factory):
    produto_factory(nome="A", estoque=3)
    produto_factory(nome="B", estoque=5)

    assert [p.nome for p in ProdutoRepositorio().listar_estoque_baixo(4)] == ["A"]


def test_em_estoque(produto_factory):
    produto = produto_factory(estoque=0, preco=Decimal("1.00"))

    assert produto.em_estoque is False
    assert ProdutoRepositorio().listar_em_estoque() == []
