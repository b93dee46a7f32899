# carrinho/services/checkout_service.py

from __future__ import annotations

import copy
import logging
from decimal import Decimal
from typing import Optional

from django.db import transaction
from django.utils import timezone

from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from carrinho.services.carrinho_service import Carrinho, arredondar_centavos
from carrinho.services.dto import ItemCarrinho, Pedido
from carrinho.services.exceptions import CarrinhoVazioError
from vendas.services.dto import DadosVenda
from vendas.services.repositorio_service import VendaRepositorio
from vendas.services.venda_service import criar_venda

logger = logging.getLogger(__name__)


def _dados_venda(item: ItemCarrinho, cliente_id: str, data) -> DadosVenda:
    """
    Preço de tabela como unitário; a redução da promoção vira desconto.
    """
    if item.preco_original is not None:
        preco_unitario = item.preco_original
        desconto = arredondar_centavos((item.preco_original - item.preco) * item.quantidade)
    else:
        preco_unitario = item.preco
        desconto = Decimal("0.00")

    return DadosVenda(
        produto_id=item.produto_id,
        cliente_id=cliente_id,
        quantidade=item.quantidade,
        preco_unitario=preco_unitario,
        desconto=desconto,
        data=data,
    )


def finalizar_compra(
    carrinho: Carrinho,
    cliente_id: str,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> Pedido:
    """
    Converte o carrinho em vendas (uma por linha), todas na mesma transação,
    e esvazia o carrinho.

    Qualquer falha (estoque insuficiente, produto/cliente inexistente)
    desfaz todas as vendas do pedido e mantém o carrinho intacto.
    """
    if carrinho.vazio:
        raise CarrinhoVazioError()

    agora = timezone.now()
    pedido_id = f"PED-{int(agora.timestamp() * 1000)}"

    logger.info(
        "Finalizando compra. pedido_id=%s, cliente_id=%s, linhas=%s, total=%s",
        pedido_id,
        cliente_id,
        len(carrinho.itens),
        carrinho.total,
    )

    with transaction.atomic(using=VendaRepositorio(gerenciador).alias):
        vendas = [
            criar_venda(_dados_venda(item, cliente_id, agora), gerenciador=gerenciador)
            for item in carrinho.itens
        ]

    pedido = Pedido(
        id=pedido_id,
        cliente_id=cliente_id,
        itens=copy.deepcopy(carrinho.itens),
        subtotal=carrinho.subtotal,
        impostos=carrinho.impostos,
        total=carrinho.total,
        criado_em=agora,
        promocao=copy.deepcopy(carrinho.promocao),
        vendas_ids=[v.id for v in vendas],
    )

    carrinho.limpar()

    logger.info(
        "Compra finalizada. pedido_id=%s, vendas=%s, total=%s",
        pedido.id,
        len(pedido.vendas_ids),
        pedido.total,
    )
    return pedido
