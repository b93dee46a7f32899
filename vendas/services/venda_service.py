# vendas/services/venda_service.py

from __future__ import annotations

import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from clientes.services.repositorio_service import ClienteRepositorio
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.models.venda_models import CENTAVOS, Venda
from vendas.services.dto import DadosVenda
from vendas.services.exceptions import EstoqueInsuficienteError
from vendas.services.repositorio_service import VendaRepositorio

logger = logging.getLogger(__name__)


def criar_venda(
    dados: DadosVenda,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> Venda:
    """
    Registra uma venda e baixa o estoque do produto.

    Fluxo:
    - Valida quantidade > 0 e desconto >= 0.
    - Produto e cliente precisam existir (RegistroNaoEncontradoError).
    - quantidade <= estoque do produto, senão EstoqueInsuficienteError.
    - total = max(0, quantidade * preco_unitario - desconto).
    - Insere a venda e grava estoque - quantidade.

    As duas escritas acontecem na MESMA transação, com a linha do produto
    travada: ou a venda e a baixa são gravadas juntas, ou nenhuma.
    """
    produtos = ProdutoRepositorio(gerenciador)
    clientes = ClienteRepositorio(gerenciador)
    vendas = VendaRepositorio(gerenciador)

    if dados.quantidade is None or int(dados.quantidade) <= 0:
        raise ValidationError("Quantidade da venda deve ser maior que zero.")
    quantidade = int(dados.quantidade)

    desconto = Decimal(dados.desconto or 0).quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    if desconto < 0:
        raise ValidationError("Desconto não pode ser negativo.")

    with transaction.atomic(using=vendas.alias):
        produto = produtos.obter_por_id(dados.produto_id, bloquear=True)
        cliente = clientes.obter_por_id(dados.cliente_id)

        if quantidade > produto.estoque:
            logger.warning(
                "Venda recusada por estoque insuficiente. produto_id=%s, estoque=%s, qtd=%s",
                produto.id,
                produto.estoque,
                quantidade,
            )
            raise EstoqueInsuficienteError(
                produto_id=produto.id,
                produto_nome=produto.nome,
                disponivel=produto.estoque,
                solicitado=quantidade,
            )

        preco_unitario = (
            produto.preco if dados.preco_unitario is None else Decimal(dados.preco_unitario)
        ).quantize(CENTAVOS, rounding=ROUND_HALF_UP)

        venda = Venda(
            data=dados.data or timezone.now(),
            cliente_id=cliente.id,
            cliente_nome=cliente.nome_exibicao,
            produto_id=produto.id,
            produto_nome=produto.nome,
            quantidade=quantidade,
            preco_unitario=preco_unitario,
            desconto=desconto,
            valor_total=Venda.calcular_total(quantidade, preco_unitario, desconto),
        )
        if dados.id:
            venda.id = dados.id

        logger.info(
            "Registrando venda. produto_id=%s, cliente_id=%s, qtd=%s, preco_unit=%s, desconto=%s, total=%s",
            produto.id,
            cliente.id,
            quantidade,
            preco_unitario,
            desconto,
            venda.valor_total,
        )

        venda = vendas.adicionar(venda)
        produtos.ajustar_estoque(produto, -quantidade)

    logger.info(
        "Venda registrada. venda_id=%s, produto_id=%s, estoque_restante=%s",
        venda.id,
        produto.id,
        produto.estoque,
    )
    return venda


def excluir_venda(
    venda_id: str,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> Optional[Venda]:
    """
    Exclui a venda e devolve a quantidade ao estoque do produto.

    - Venda inexistente: no-op, retorna None.
    - Produto não existe mais: só a venda é removida.
    - O estoque só é devolvido por quem de fato removeu a linha da venda.
    Retorna a venda removida.
    """
    produtos = ProdutoRepositorio(gerenciador)
    vendas = VendaRepositorio(gerenciador)

    with transaction.atomic(using=vendas.alias):
        venda = vendas.buscar(venda_id)
        if venda is None or not vendas.remover(venda.id):
            logger.info("Exclusão de venda inexistente ignorada. venda_id=%s", venda_id)
            return None

        produto = produtos.buscar(venda.produto_id, bloquear=True)
        if produto is None:
            logger.warning(
                "Produto da venda não existe mais; estoque não devolvido. venda_id=%s, produto_id=%s",
                venda.id,
                venda.produto_id,
            )
        else:
            produtos.ajustar_estoque(produto, venda.quantidade)

    logger.info(
        "Venda excluída. venda_id=%s, produto_id=%s, qtd_devolvida=%s",
        venda.id,
        venda.produto_id,
        venda.quantidade if produto is not None else 0,
    )
    return venda
