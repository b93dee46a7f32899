import logging
from decimal import Decimal

import pytest
from django.core.exceptions import ValidationError

from armazenamento.exceptions import RegistroNaoEncontradoError
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.services.dto import DadosVenda
from vendas.services.exceptions import EstoqueInsuficienteError
from vendas.services.repositorio_service import VendaRepositorio
from vendas.services.venda_service import criar_venda, excluir_venda

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.django_db


def _estoque(produto_id):
    return ProdutoRepositorio().obter_por_id(produto_id).estoque


def test_criar_venda_baixa_estoque_e_calcula_total(produto_factory, cliente_factory):
    """
    Cenário:
    - Produto com preço 10.00 e estoque 5.
    - Venda de 3 unidades com desconto de 2.00.

    Esperado:
    - total = 3 * 10.00 - 2.00 = 28.00
    - estoque 5 -> 2
    - nomes copiados para a venda
    """
    produto = produto_factory(nome="Doce de Banana", preco=Decimal("10.00"), estoque=5)
    cliente = cliente_factory(nome_fantasia="Mercado Central")

    venda = criar_venda(
        DadosVenda(
            produto_id=produto.id,
            cliente_id=cliente.id,
            quantidade=3,
            desconto=Decimal("2.00"),
        )
    )

    logger.info("Venda criada. id=%s, total=%s", venda.id, venda.valor_total)

    assert venda.valor_total == Decimal("28.00")
    assert venda.preco_unitario == Decimal("10.00")
    assert venda.produto_nome == "Doce de Banana"
    assert venda.cliente_nome == "Mercado Central"
    assert _estoque(produto.id) == 2
    assert VendaRepositorio().obter_por_id(venda.id).quantidade == 3


def test_total_nunca_fica_negativo(produto_factory, cliente_factory):
    produto = produto_factory(preco=Decimal("1.00"), estoque=5)
    cliente = cliente_factory()

    venda = criar_venda(
        DadosVenda(
            produto_id=produto.id,
            cliente_id=cliente.id,
            quantidade=1,
            desconto=Decimal("5.00"),
        )
    )

    assert venda.valor_total == Decimal("0.00")


def test_estoque_insuficiente_nao_grava_nada(produto_factory, cliente_factory):
    produto = produto_factory(estoque=2)
    cliente = cliente_factory()

    with pytest.raises(EstoqueInsuficienteError) as exc:
        criar_venda(
            DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=3)
        )

    assert exc.value.disponivel == 2
    assert exc.value.solicitado == 3
    assert _estoque(produto.id) == 2
    assert VendaRepositorio().listar() == []


def test_produto_ou_cliente_inexistente(produto_factory, cliente_factory):
    produto = produto_factory()
    cliente = cliente_factory()

    with pytest.raises(RegistroNaoEncontradoError):
        criar_venda(DadosVenda(produto_id="fantasma", cliente_id=cliente.id, quantidade=1))

    with pytest.raises(RegistroNaoEncontradoError):
        criar_venda(DadosVenda(produto_id=produto.id, cliente_id="fantasma", quantidade=1))

    assert _estoque(produto.id) == 5
    assert VendaRepositorio().listar() == []


@pytest.mark.parametrize("quantidade", [0, -1])
def test_quantidade_invalida(produto_factory, cliente_factory, quantidade):
    produto = produto_factory()
    cliente = cliente_factory()

    with pytest.raises(ValidationError):
        criar_venda(
            DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=quantidade)
        )


def test_desconto_negativo(produto_factory, cliente_factory):
    produto = produto_factory()
    cliente = cliente_factory()

    with pytest.raises(ValidationError):
        criar_venda(
            DadosVenda(
                produto_id=produto.id,
                cliente_id=cliente.id,
                quantidade=1,
                desconto=Decimal("-1.00"),
            )
        )


def test_excluir_venda_devolve_estoque_exatamente(produto_factory, cliente_factory):
    produto = produto_factory(estoque=5)
    cliente = cliente_factory()
    venda = criar_venda(
        DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=4)
    )
    assert _estoque(produto.id) == 1

    removida = excluir_venda(venda.id)

    assert removida.id == venda.id
    assert _estoque(produto.id) == 5
    assert VendaRepositorio().buscar(venda.id) is None


def test_excluir_venda_inexistente_e_no_op():
    assert excluir_venda("nao-existe") is None


def test_exclusao_concorrente_nao_devolve_estoque_duas_vezes(
    produto_factory, cliente_factory, monkeypatch
):
    produto = produto_factory(estoque=5)
    cliente = cliente_factory()
    venda = criar_venda(
        DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=2)
    )
    assert _estoque(produto.id) == 3

    # outro processo removeu a linha entre a leitura e a remoção
    monkeypatch.setattr(VendaRepositorio, "remover", lambda self, id: False)

    assert excluir_venda(venda.id) is None
    assert _estoque(produto.id) == 3


def test_excluir_venda_de_produto_removido(produto_factory, cliente_factory):
    produto = produto_factory(estoque=5)
    cliente = cliente_factory()
    venda = criar_venda(
        DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=2)
    )
    ProdutoRepositorio().remover(produto.id)

    excluir_venda(venda.id)

    assert VendaRepositorio().buscar(venda.id) is None
    assert ProdutoRepositorio().buscar(produto.id) is None


def test_recusa_por_estoque_e_registrada_no_log(produto_factory, cliente_factory, caplog):
    produto = produto_factory(estoque=1)
    cliente = cliente_factory()

    with caplog.at_level(logging.WARNING, logger="vendas.services.venda_service"):
        with pytest.raises(EstoqueInsuficienteError):
            criar_venda(
                DadosVenda(produto_id=produto.id, cliente_id=cliente.id, quantidade=2)
            )

    assert "estoque insuficiente" in caplog.text
    assert f"produto_id={produto.id}" in caplog.text
