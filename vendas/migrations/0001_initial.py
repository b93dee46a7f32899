from decimal import Decimal

import django.core.validators
import django.utils.timezone
from django.db import migrations, models

import armazenamento.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Venda",
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
                ("data", models.DateTimeField(default=django.utils.timezone.now)),
                (
                    "cliente_id",
                    models.CharField(help_text="Cliente da venda.", max_length=64),
                ),
                (
                    "cliente_nome",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                (
                    "produto_id",
                    models.CharField(help_text="Produto vendido.", max_length=64),
                ),
                (
                    "produto_nome",
                    models.CharField(blank=True, default="", max_length=150),
                ),
                (
                    "quantidade",
                    models.PositiveIntegerField(
                        validators=[django.core.validators.MinValueValidator(1)]
                    ),
                ),
                (
                    "preco_unitario",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.00"))
                        ],
                    ),
                ),
                (
                    "desconto",
                    models.DecimalField(
                        decimal_places=2,
                        default=Decimal("0.00"),
                        max_digits=12,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.00"))
                        ],
                    ),
                ),
                (
                    "valor_total",
                    models.DecimalField(
                        decimal_places=2, default=Decimal("0.00"), max_digits=12
                    ),
                ),
            ],
            options={
                "verbose_name": "Venda",
                "verbose_name_plural": "Vendas",
                "db_table": "venda",
                "ordering": ["-data"],
                "indexes": [
                    models.Index(fields=["data"], name="idx_venda_data"),
                    models.Index(fields=["produto_id"], name="idx_venda_produto"),
                ],
            },
        ),
    ]
