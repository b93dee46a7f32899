from decimal import Decimal

import django.core.validators
from django.db import migrations, models

import armazenamento.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Produto",
            fields=[
                (
                    "id",
                    models.CharField(
                        default=armazenamento.ids.gerar_id,
                        max_length=64,
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "nome",
                    models.CharField(
                        help_text="Nome do produto exibido no catálogo.",
                        max_length=150,
                    ),
                ),
                (
                    "descricao",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Descrição opcional do produto.",
                    ),
                ),
                (
                    "preco",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        help_text="Preço unitário de venda.",
                        max_digits=12,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.00"))
                        ],
                    ),
                ),
                (
                    "estoque",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Quantidade disponível em estoque.",
                    ),
                ),
                ("categoria", models.CharField(blank=True, default="", max_length=80)),
                (
                    "imagem_url",
                    models.CharField(
                        blank=True,
                        default="",
                        help_text="Caminho/URL da imagem do produto.",
                        max_length=500,
                    ),
                ),
            ],
            options={
                "verbose_name": "Produto",
                "verbose_name_plural": "Produtos",
                "db_table": "produto",
                "ordering": ["nome"],
                "indexes": [
                    models.Index(fields=["nome"], name="idx_prod_nome"),
                    models.Index(fields=["categoria"], name="idx_prod_categoria"),
                ],
            },
        ),
    ]
