from decimal import Decimal

import pytest

from carrinho.services.carrinho_service import Carrinho
from carrinho.services.checkout_service import finalizar_compra
from carrinho.services.dto import Promocao
from carrinho.services.exceptions import CarrinhoVazioError
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.services.exceptions import EstoqueInsuficienteError
from vendas.services.repositorio_service import VendaRepositorio

pytestmark = pytest.mark.django_db


def test_carrinho_vazio(cliente_factory):
    with pytest.raises(CarrinhoVazioError):
        finalizar_compra(Carrinho(), cliente_factory().id)


def test_finalizar_gera_uma_venda_por_linha(produto_factory, cliente_factory):
    """
    Cenário:
    - Doce 10.00 x2 com promoção de 20%; Geleia 5.00 x1.

    Esperado:
    - duas vendas; a promovida com preço de tabela e o desconto da promoção
    - estoques baixados
    - carrinho vazio e sem promoção
    """
    doce = produto_factory(preco=Decimal("10.00"), estoque=5)
    geleia = produto_factory(preco=Decimal("5.00"), estoque=5)
    cliente = cliente_factory()

    carrinho = Carrinho()
    carrinho.adicionar(doce, 2)
    carrinho.adicionar(geleia, 1)
    carrinho.aplicar_promocao(
        Promocao(mensagem="20%", produto_id=doce.id, percentual_desconto=Decimal("0.2"))
    )

    pedido = finalizar_compra(carrinho, cliente.id)

    assert pedido.id.startswith("PED-")
    assert pedido.subtotal == Decimal("21.00")
    assert pedido.impostos == Decimal("1.05")
    assert pedido.total == Decimal("22.05")
    assert pedido.promocao.produto_id == doce.id
    assert len(pedido.vendas_ids) == 2

    vendas = {v.produto_id: v for v in VendaRepositorio().listar()}
    assert vendas[doce.id].preco_unitario == Decimal("10.00")
    assert vendas[doce.id].desconto == Decimal("4.00")
    assert vendas[doce.id].valor_total == Decimal("16.00")
    assert vendas[geleia.id].valor_total == Decimal("5.00")

    produtos = ProdutoRepositorio()
    assert produtos.obter_por_id(doce.id).estoque == 3
    assert produtos.obter_por_id(geleia.id).estoque == 4

    assert carrinho.vazio
    assert carrinho.promocao is None


def test_falha_em_uma_linha_desfaz_o_pedido(produto_factory, cliente_factory):
    doce = produto_factory(estoque=5)
    geleia = produto_factory(estoque=5)
    cliente = cliente_factory()

    carrinho = Carrinho()
    carrinho.adicionar(doce, 2)
    carrinho.adicionar(geleia, 3)

    # estoque vendido por outro caminho depois de montar o carrinho
    ProdutoRepositorio().ajustar_estoque(ProdutoRepositorio().obter_por_id(geleia.id), -4)

    with pytest.raises(EstoqueInsuficienteError):
        finalizar_compra(carrinho, cliente.id)

    assert VendaRepositorio().listar() == []
    assert ProdutoRepositorio().obter_por_id(doce.id).estoque == 5
    assert carrinho.quantidade_total == 5
