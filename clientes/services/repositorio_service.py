# clientes/services/repositorio_service.py

from django.db.models import Value
from django.db.models.functions import Coalesce, Lower, NullIf

from armazenamento.services.repositorio_base import RepositorioBase


class ClienteRepositorio(RepositorioBase):
    colecao = "clientes"
    # nome fantasia, com fallback para razão social, sem diferenciar caixa
    ordenacao = (
        Lower(Coalesce(NullIf("nome_fantasia", Value("")), "razao_social")).asc(),
        "id",
    )
