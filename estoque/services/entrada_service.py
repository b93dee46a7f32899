# estoque/services/entrada_service.py

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from django.core.exceptions import ValidationError
from django.db import transaction
from django.utils import timezone

from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from estoque.models import Entrada
from estoque.services.repositorio_service import EntradaRepositorio
from produtos.services.repositorio_service import ProdutoRepositorio

logger = logging.getLogger(__name__)


@dataclass
class DadosEntrada:
    produto_id: str
    fornecedor: str
    quantidade: int
    preco_unitario: Decimal
    data: Optional[datetime] = None
    id: Optional[str] = None


def registrar_entrada(
    dados: DadosEntrada,
    *,
    gerenciador: Optional[GerenciadorArmazenamento] = None,
) -> Entrada:
    """
    Registra a entrada de mercadoria e soma a quantidade ao estoque,
    na mesma transação.
    """
    produtos = ProdutoRepositorio(gerenciador)
    entradas = EntradaRepositorio(gerenciador)

    if dados.quantidade is None or int(dados.quantidade) <= 0:
        raise ValidationError("Quantidade da entrada deve ser maior que zero.")
    quantidade = int(dados.quantidade)

    preco_unitario = Decimal(dados.preco_unitario).quantize(
        Decimal("0.01"), rounding=ROUND_HALF_UP
    )
    if preco_unitario <= 0:
        raise ValidationError("Valor unitário da entrada deve ser positivo.")

    with transaction.atomic(using=entradas.alias):
        produto = produtos.obter_por_id(dados.produto_id, bloquear=True)

        entrada = Entrada(
            data=dados.data or timezone.now(),
            fornecedor=dados.fornecedor,
            produto_id=produto.id,
            produto_nome=produto.nome,
            quantidade=quantidade,
            preco_unitario=preco_unitario,
            valor_total=Entrada.calcular_total(quantidade, preco_unitario),
        )
        if dados.id:
            entrada.id = dados.id

        entrada = entradas.adicionar(entrada)
        produtos.ajustar_estoque(produto, quantidade)

    logger.info(
        "Entrada registrada. entrada_id=%s, produto_id=%s, fornecedor=%s, qtd=%s, estoque_novo=%s",
        entrada.id,
        produto.id,
        entrada.fornecedor,
        quantidade,
        produto.estoque,
    )
    return entrada
