import json
from decimal import Decimal

import pytest

from carrinho.services.carrinho_service import Carrinho
from carrinho.services.dto import Promocao
from carrinho.services.exceptions import PromocaoInvalidaError
from carrinho.services.promocao_service import (
    MENSAGEM_PRODUTO_INVALIDO,
    MENSAGEM_SEM_ESTOQUE,
    MENSAGEM_SEM_RESPOSTA,
    solicitar_promocao,
)

pytestmark = pytest.mark.django_db


class GeradorFixo:
    """
    Gerador de teste: devolve sempre a mesma promoção e guarda a chamada.
    """

    def __init__(self, promocao):
        self.promocao = promocao
        self.chamadas = []

    def gerar(self, historico_compras, inventario_atual, itens_carrinho):
        self.chamadas.append(
            {
                "historico_compras": json.loads(historico_compras),
                "inventario_atual": json.loads(inventario_atual),
                "itens_carrinho": (
                    json.loads(itens_carrinho) if itens_carrinho is not None else None
                ),
            }
        )
        return self.promocao


def test_sem_produtos_em_estoque_nao_chama_gerador(produto_factory):
    produto_factory(estoque=0)
    gerador = GeradorFixo(Promocao(mensagem="não deveria"))

    promocao = solicitar_promocao(gerador)

    assert promocao.mensagem == MENSAGEM_SEM_ESTOQUE
    assert promocao.produto_id is None
    assert gerador.chamadas == []


def test_inventario_enviado_so_com_produtos_em_estoque(produto_factory):
    com = produto_factory(nome="Com estoque", estoque=3)
    produto_factory(nome="Sem estoque", estoque=0)
    gerador = GeradorFixo(Promocao(mensagem="Olá"))

    solicitar_promocao(gerador)

    chamada = gerador.chamadas[0]
    assert [p["id"] for p in chamada["inventario_atual"]] == [com.id]
    assert chamada["itens_carrinho"] is None


def test_itens_do_carrinho_sao_enviados(produto_factory):
    produto = produto_factory(estoque=3)
    carrinho = Carrinho()
    carrinho.adicionar(produto, 2)
    gerador = GeradorFixo(Promocao(mensagem="Olá"))

    solicitar_promocao(gerador, carrinho)

    assert gerador.chamadas[0]["itens_carrinho"] == [
        {"id": produto.id, "nome": produto.nome, "quantidade": 2, "preco": 10.0}
    ]


def test_promocao_valida_e_devolvida(produto_factory):
    produto = produto_factory(estoque=3)
    gerador = GeradorFixo(
        Promocao(mensagem="15% off!", produto_id=produto.id, percentual_desconto=0.15)
    )

    promocao = solicitar_promocao(gerador)

    assert promocao.produto_id == produto.id
    assert promocao.percentual_desconto == Decimal("0.15")
    assert promocao.mensagem == "15% off!"


def test_desconto_sem_produto_e_descartado(produto_factory):
    produto_factory(estoque=3)
    gerador = GeradorFixo(Promocao(mensagem="Desconto!", percentual_desconto=0.1))

    promocao = solicitar_promocao(gerador)

    assert promocao.percentual_desconto is None
    assert promocao.mensagem == "Desconto!"


def test_produto_fora_do_estoque_troca_mensagem(produto_factory):
    produto_factory(estoque=3)
    sem_estoque = produto_factory(estoque=0)
    gerador = GeradorFixo(
        Promocao(mensagem="20%!", produto_id=sem_estoque.id, percentual_desconto=0.2)
    )

    promocao = solicitar_promocao(gerador)

    assert promocao.produto_id is None
    assert promocao.percentual_desconto is None
    assert promocao.mensagem == MENSAGEM_PRODUTO_INVALIDO


def test_percentual_fora_do_intervalo(produto_factory):
    produto = produto_factory(estoque=3)
    gerador = GeradorFixo(
        Promocao(mensagem="x", produto_id=produto.id, percentual_desconto=1.2)
    )

    with pytest.raises(PromocaoInvalidaError):
        solicitar_promocao(gerador)


def test_gerador_sem_resposta(produto_factory):
    produto_factory(estoque=3)

    promocao = solicitar_promocao(GeradorFixo(None))

    assert promocao.mensagem == MENSAGEM_SEM_RESPOSTA
