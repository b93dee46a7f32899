import logging
from datetime import datetime, timezone as dt_timezone
from decimal import Decimal

import pytest
from django.utils import timezone

from armazenamento.exceptions import RegistroNaoEncontradoError
from clientes.services.repositorio_service import ClienteRepositorio
from fornecedores.services.repositorio_service import FornecedorRepositorio
from produtos.services.repositorio_service import ProdutoRepositorio
from vendas.services.repositorio_service import VendaRepositorio

logger = logging.getLogger(__name__)

pytestmark = pytest.mark.django_db


def _venda(id, data):
    return {
        "id": id,
        "data": data,
        "cliente_id": "C1",
        "produto_id": "P1",
        "quantidade": 1,
        "preco_unitario": Decimal("10.00"),
        "valor_total": Decimal("10.00"),
    }


def test_vendas_listadas_da_mais_recente_para_a_mais_antiga():
    repo = VendaRepositorio()
    repo.adicionar(_venda("V1", "2024-01-10T10:00:00Z"))
    repo.adicionar(_venda("V2", "2024-03-01T10:00:00Z"))
    repo.adicionar(_venda("V3", "2024-02-15T10:00:00Z"))

    assert [v.id for v in repo.listar()] == ["V2", "V3", "V1"]


def test_datas_string_sao_reidratadas_como_datetime():
    repo = VendaRepositorio()
    repo.adicionar(_venda("V1", "2024-01-10T10:00:00Z"))

    venda = repo.obter_por_id("V1")

    assert isinstance(venda.data, datetime)
    assert timezone.is_aware(venda.data)
    assert venda.data == datetime(2024, 1, 10, 10, 0, tzinfo=dt_timezone.utc)


def test_clientes_ordenados_por_nome_exibicao_sem_caixa(cliente_factory):
    cliente_factory(razao_social="Zeta Comércio", nome_fantasia="")
    cliente_factory(razao_social="X LTDA", nome_fantasia="beta doces")
    cliente_factory(razao_social="Y LTDA", nome_fantasia="Alfa Mercado")

    nomes = [c.nome_exibicao for c in ClienteRepositorio().listar()]

    assert nomes == ["Alfa Mercado", "beta doces", "Zeta Comércio"]


def test_fornecedores_ordenados_por_nome(fornecedor_factory):
    fornecedor_factory(nome="banana & Cia")
    fornecedor_factory(nome="Açúcar União")
    fornecedor_factory(nome="Cacau Sul")

    nomes = [f.nome for f in FornecedorRepositorio().listar()]

    assert nomes == ["Açúcar União", "banana & Cia", "Cacau Sul"]


def test_obter_por_id_inexistente_gera_nao_encontrado():
    with pytest.raises(RegistroNaoEncontradoError) as exc:
        ProdutoRepositorio().obter_por_id("nao-existe")

    assert exc.value.colecao == "produtos"
    assert exc.value.chave == "nao-existe"


def test_atualizar_inexistente_gera_nao_encontrado():
    repo = ProdutoRepositorio()

    with pytest.raises(RegistroNaoEncontradoError):
        repo.atualizar(
            {"id": "fantasma", "nome": "X", "preco": Decimal("1.00"), "estoque": 1}
        )

    assert repo.buscar("fantasma") is None


def test_atualizar_sobrescreve_registro(produto_factory):
    produto = produto_factory(nome="Antigo")
    produto.nome = "Novo"

    ProdutoRepositorio().atualizar(produto)

    assert ProdutoRepositorio().obter_por_id(produto.id).nome == "Novo"


def test_remover_inexistente_nao_gera_erro():
    assert ProdutoRepositorio().remover("nao-existe") is False
