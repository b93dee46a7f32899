# armazenamento/colecoes.py

from __future__ import annotations

from django.apps import apps
from django.db import models

from armazenamento.exceptions import ColecaoDesconhecidaError

# nome da coleção -> "app_label.Model"
COLECOES: dict[str, str] = {
    "produtos": "produtos.Produto",
    "entradas": "estoque.Entrada",
    "vendas": "vendas.Venda",
    "clientes": "clientes.Cliente",
    "fornecedores": "fornecedores.Fornecedor",
    "transacoes_financeiras": "financeiro.TransacaoFinanceira",
    "espelho_sessao": "carrinho.EspelhoSessao",
}

# Campos de data de cada coleção (reidratados em leituras e restauração).
CAMPOS_DATA: dict[str, tuple[str, ...]] = {
    "produtos": (),
    "entradas": ("data",),
    "vendas": ("data",),
    "clientes": ("data_cadastro",),
    "fornecedores": ("data_cadastro",),
    "transacoes_financeiras": ("data",),
    "espelho_sessao": (),
}


def obter_modelo(colecao: str) -> type[models.Model]:
    try:
        rotulo = COLECOES[colecao]
    except KeyError:
        raise ColecaoDesconhecidaError(colecao) from None
    return apps.get_model(rotulo)


def campos_data(colecao: str) -> tuple[str, ...]:
    if colecao not in COLECOES:
        raise ColecaoDesconhecidaError(colecao)
    return CAMPOS_DATA.get(colecao, ())
