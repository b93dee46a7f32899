# clientes/models/cliente_models.py

from django.db import models
from django.utils import timezone

from armazenamento.ids import gerar_id


class Cliente(models.Model):
    """
    Cadastro de clientes (pessoa jurídica ou física).
    Referenciado pelas vendas por `cliente_id`.
    """

    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    data_cadastro = models.DateTimeField(default=timezone.now)

    razao_social = models.CharField(max_length=150)
    nome_fantasia = models.CharField(max_length=100, blank=True, default="")
    categoria = models.CharField(max_length=50, blank=True, default="")

    endereco = models.CharField(max_length=150, blank=True, default="")
    bairro = models.CharField(max_length=100, blank=True, default="")
    cidade = models.CharField(max_length=100, blank=True, default="")
    telefone = models.CharField(max_length=20, blank=True, default="")

    class Meta:
        db_table = "cliente"
        verbose_name = "Cliente"
        verbose_name_plural = "Clientes"
        indexes = [
            models.Index(fields=["nome_fantasia"], name="idx_cliente_nome_fantasia"),
            models.Index(fields=["razao_social"], name="idx_cliente_razao_social"),
        ]

    def __str__(self) -> str:
        return self.nome_exibicao

    @property
    def nome_exibicao(self) -> str:
        """
        Nome fantasia, com fallback para a razão social.
        """
        return self.nome_fantasia or self.razao_social
