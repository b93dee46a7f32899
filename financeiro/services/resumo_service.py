# financeiro/services/resumo_service.py

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Iterable, List, Optional

from django.utils import timezone

from financeiro.models import TipoTransacao
from financeiro.models.transacao_financeira_models import TIPOS_SAIDA

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


@dataclass
class ResumoMensal:
    mes: str  # AAAA-MM
    entradas: Decimal = ZERO
    saidas: Decimal = ZERO


@dataclass
class ResumoFinanceiro:
    total_entradas: Decimal
    total_saidas: Decimal
    saldo: Decimal
    quantidade: int
    meses: List[ResumoMensal] = field(default_factory=list)


def _data_local(valor) -> date:
    if timezone.is_aware(valor):
        valor = timezone.localtime(valor)
    return valor.date()


def filtrar_transacoes(
    transacoes: Iterable,
    *,
    inicio: Optional[date] = None,
    fim: Optional[date] = None,
    tipo: Optional[str] = None,
    categoria: Optional[str] = None,
    status: Optional[str] = None,
) -> list:
    """
    Filtro do livro-caixa. `inicio` e `fim` são inclusivos (dia inteiro).
    Filtros vazios/None são ignorados.
    """
    resultado = []
    for t in transacoes:
        dia = _data_local(t.data)
        if inicio and dia < inicio:
            continue
        if fim and dia > fim:
            continue
        if tipo and t.tipo != tipo:
            continue
        if categoria and t.categoria != categoria:
            continue
        if status and t.status != status:
            continue
        resultado.append(t)
    return resultado


def resumir(transacoes: Iterable, **filtros) -> ResumoFinanceiro:
    """
    Totais de entradas/saídas, saldo e agrupamento mensal (ordem crescente).

    Entradas: tipo "Entrada".
    Saídas: "Saída", "Despesa fixa" e "Despesa variável".
    """
    filtradas = filtrar_transacoes(transacoes, **filtros)

    total_entradas = ZERO
    total_saidas = ZERO
    por_mes: dict[str, ResumoMensal] = {}

    for t in filtradas:
        mes = _data_local(t.data).strftime("%Y-%m")
        bucket = por_mes.setdefault(mes, ResumoMensal(mes=mes))
        if t.tipo == TipoTransacao.ENTRADA:
            total_entradas += t.valor
            bucket.entradas += t.valor
        elif t.tipo in TIPOS_SAIDA:
            total_saidas += t.valor
            bucket.saidas += t.valor

    resumo = ResumoFinanceiro(
        total_entradas=total_entradas,
        total_saidas=total_saidas,
        saldo=total_entradas - total_saidas,
        quantidade=len(filtradas),
        meses=[por_mes[m] for m in sorted(por_mes)],
    )

    logger.info(
        "Resumo financeiro gerado. transacoes=%s, entradas=%s, saidas=%s, saldo=%s",
        resumo.quantidade,
        resumo.total_entradas,
        resumo.total_saidas,
        resumo.saldo,
    )
    return resumo
