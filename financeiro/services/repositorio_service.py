# financeiro/services/repositorio_service.py

from armazenamento.services.repositorio_base import RepositorioBase


class TransacaoFinanceiraRepositorio(RepositorioBase):
    colecao = "transacoes_financeiras"
    ordenacao = ("-data", "id")
