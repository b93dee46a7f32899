# fornecedores/models/fornecedor_models.py

from django.db import models
from django.utils import timezone

from armazenamento.ids import gerar_id


class Fornecedor(models.Model):
    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    data_cadastro = models.DateTimeField(default=timezone.now)

    nome = models.CharField(max_length=100)

    endereco = models.CharField(max_length=150, blank=True, default="")
    bairro = models.CharField(max_length=100, blank=True, default="")
    cidade = models.CharField(max_length=100, blank=True, default="")
    telefone = models.CharField(max_length=20, blank=True, default="")

    produtos_fornecidos = models.TextField(
        blank=True,
        default="",
        help_text="Produtos que o fornecedor entrega (texto livre).",
    )

    class Meta:
        db_table = "fornecedor"
        verbose_name = "Fornecedor"
        verbose_name_plural = "Fornecedores"
        ordering = ["nome"]
        indexes = [
            models.Index(fields=["nome"], name="idx_fornecedor_nome"),
        ]

    def __str__(self) -> str:
        return self.nome
