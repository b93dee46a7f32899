import logging

import pytest
from django.db import connections, models
from django.db.migrations import operations
from django.db.migrations.recorder import MigrationRecorder

from armazenamento.exceptions import (
    ArmazenamentoIndisponivelError,
    ConflitoVersaoSchemaError,
    MigracaoDestrutivaError,
)
from armazenamento.services.gerenciador_service import (
    GerenciadorArmazenamento,
    obter_gerenciador,
    redefinir_gerenciador,
    validar_migracao_aditiva,
)

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.django_db


def _migracoes_conhecidas(gerenciador):
    recorder = MigrationRecorder(connections[gerenciador.alias])
    return {
        chave
        for chave in recorder.applied_migrations()
        if chave[0] in gerenciador.apps_armazenamento
    }


def test_abrir_leva_schema_ate_versao_alvo():
    """
    Cenário:
    - Abrir o armazenamento com todas as migrações das coleções.

    Esperado:
    - versao_schema == versao_alvo == nº de migrações das apps do armazenamento.
    """
    gerenciador = GerenciadorArmazenamento().abrir()
    try:
        assert gerenciador.aberto is True
        assert gerenciador.versao_schema == gerenciador.versao_alvo
        assert gerenciador.versao_schema == len(_migracoes_conhecidas(gerenciador))
        # produtos(2) + estoque(1) + vendas(2) + clientes(1) + fornecedores(1)
        # + financeiro(1) + carrinho(1)
        assert gerenciador.versao_schema == 9
    finally:
        gerenciador.fechar()


def test_contagem_de_referencias():
    gerenciador = GerenciadorArmazenamento()

    gerenciador.abrir()
    gerenciador.abrir()
    assert gerenciador.referencias == 2

    gerenciador.fechar()
    assert gerenciador.aberto is True
    assert gerenciador.referencias == 1

    gerenciador.fechar()
    assert gerenciador.aberto is False
    assert gerenciador.referencias == 0

    # fechar a mais não quebra
    gerenciador.fechar()
    assert gerenciador.referencias == 0


def test_context_manager_abre_e_fecha():
    with GerenciadorArmazenamento() as gerenciador:
        assert gerenciador.aberto is True
    assert gerenciador.aberto is False


def test_alias_inexistente_gera_armazenamento_indisponivel():
    gerenciador = GerenciadorArmazenamento(alias="nao_existe")

    with pytest.raises(ArmazenamentoIndisponivelError) as exc:
        gerenciador.abrir()

    assert "nao_existe" in exc.value.mensagem
    assert gerenciador.aberto is False


def test_migracao_desconhecida_gera_conflito_de_versao():
    """
    Cenário:
    - Outro processo (código mais novo) aplicou uma migração que este
      código não conhece.

    Esperado:
    - ConflitoVersaoSchemaError com a mensagem de recarregar.
    """
    recorder = MigrationRecorder(connections["default"])
    recorder.record_applied("produtos", "9999_versao_futura")

    with pytest.raises(ConflitoVersaoSchemaError) as exc:
        GerenciadorArmazenamento().abrir()

    assert "recarregue a aplicação" in exc.value.mensagem
    assert ("produtos", "9999_versao_futura") in exc.value.migracoes_desconhecidas


def test_validar_migracao_aditiva_recusa_remocao():
    class MigracaoFalsa:
        app_label = "produtos"
        name = "0003_remove_dica"
        operations = [
            operations.RemoveField(model_name="produto", name="dica_imagem"),
        ]

    with pytest.raises(MigracaoDestrutivaError) as exc:
        validar_migracao_aditiva(MigracaoFalsa())

    assert exc.value.operacao == "RemoveField"
    assert exc.value.migracao == "produtos.0003_remove_dica"


def test_validar_migracao_aditiva_aceita_criacao_e_indices():
    class MigracaoFalsa:
        app_label = "vendas"
        name = "0003_indice"
        operations = [
            operations.AddIndex(
                model_name="venda",
                index=models.Index(
                    fields=["quantidade"], name="idx_venda_qtd"
                ),
            ),
        ]

    validar_migracao_aditiva(MigracaoFalsa())


def test_gerenciador_compartilhado_e_redefinicao():
    primeiro = obter_gerenciador()
    assert obter_gerenciador() is primeiro

    primeiro.abrir()
    redefinir_gerenciador()

    assert primeiro.aberto is False
    assert obter_gerenciador() is not primeiro
