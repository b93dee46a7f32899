# estoque/services/repositorio_service.py

from armazenamento.services.repositorio_base import RepositorioBase


class EntradaRepositorio(RepositorioBase):
    colecao = "entradas"
    ordenacao = ("-data", "id")

    def listar_por_produto(self, produto_id: str) -> list:
        return self.listar(produto_id=produto_id)
