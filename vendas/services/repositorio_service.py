# vendas/services/repositorio_service.py

from armazenamento.services.repositorio_base import RepositorioBase


class VendaRepositorio(RepositorioBase):
    colecao = "vendas"
    ordenacao = ("-data", "id")

    def listar_por_produto(self, produto_id: str) -> list:
        return self.listar(produto_id=produto_id)

    def listar_por_cliente(self, cliente_id: str) -> list:
        return self.listar(cliente_id=cliente_id)
