# fornecedores/services/repositorio_service.py

from django.db.models.functions import Lower

from armazenamento.services.repositorio_base import RepositorioBase


class FornecedorRepositorio(RepositorioBase):
    colecao = "fornecedores"
    ordenacao = (Lower("nome").asc(), "id")
