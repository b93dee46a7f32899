from datetime import date
from decimal import Decimal

import pytest

from financeiro.services.repositorio_service import TransacaoFinanceiraRepositorio
from financeiro.services.resumo_service import filtrar_transacoes, resumir

pytestmark = pytest.mark.django_db


@pytest.fixture
def livro_caixa(transacao_factory):
    transacao_factory(data="2024-01-10T15:00:00Z", tipo="Entrada", valor=Decimal("300.00"))
    transacao_factory(
        data="2024-01-20T15:00:00Z",
        tipo="Despesa fixa",
        categoria="Aluguel",
        valor=Decimal("120.00"),
    )
    transacao_factory(
        data="2024-02-05T15:00:00Z",
        tipo="Saída",
        categoria="Compra",
        valor=Decimal("50.00"),
        status="Em aberto",
    )
    transacao_factory(
        data="2024-02-06T15:00:00Z",
        tipo="Despesa variável",
        categoria="Transporte",
        valor=Decimal("30.00"),
    )
    return TransacaoFinanceiraRepositorio().listar()


def test_resumo_totais_e_meses(livro_caixa):
    resumo = resumir(livro_caixa)

    assert resumo.total_entradas == Decimal("300.00")
    assert resumo.total_saidas == Decimal("200.00")
    assert resumo.saldo == Decimal("100.00")
    assert resumo.quantidade == 4
    assert [(m.mes, m.entradas, m.saidas) for m in resumo.meses] == [
        ("2024-01", Decimal("300.00"), Decimal("120.00")),
        ("2024-02", Decimal("0.00"), Decimal("80.00")),
    ]


def test_filtro_por_periodo_inclusivo(livro_caixa):
    filtradas = filtrar_transacoes(
        livro_caixa, inicio=date(2024, 1, 20), fim=date(2024, 2, 5)
    )

    assert sorted(t.tipo for t in filtradas) == ["Despesa fixa", "Saída"]


def test_filtro_por_tipo_categoria_e_status(livro_caixa):
    assert resumir(livro_caixa, tipo="Entrada").total_saidas == Decimal("0.00")
    assert resumir(livro_caixa, categoria="Aluguel").total_saidas == Decimal("120.00")
    assert resumir(livro_caixa, status="Em aberto").quantidade == 1


def test_resumo_vazio():
    resumo = resumir([])

    assert resumo.saldo == Decimal("0.00")
    assert resumo.meses == []
