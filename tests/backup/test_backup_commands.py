import io

import pytest
from django.core.management import CommandError, call_command

from produtos.services.repositorio_service import ProdutoRepositorio

pytestmark = pytest.mark.django_db


def test_exportar_e_restaurar_por_linha_de_comando(tmp_path, produto_factory):
    produto_factory(id="P1", nome="Doce")

    call_command("exportar_backup", "--destino", str(tmp_path), stdout=io.StringIO())
    arquivos = list(tmp_path.glob("controle_doces_backup_*.json"))
    assert len(arquivos) == 1

    ProdutoRepositorio().remover("P1")

    saida = io.StringIO()
    call_command("restaurar_backup", str(arquivos[0]), stdout=saida)

    assert "produtos" in saida.getvalue()
    assert ProdutoRepositorio().obter_por_id("P1").nome == "Doce"


def test_restaurar_arquivo_invalido(tmp_path):
    arquivo = tmp_path / "ruim.json"
    arquivo.write_text("não é json", encoding="utf-8")

    with pytest.raises(CommandError):
        call_command("restaurar_backup", str(arquivo))
