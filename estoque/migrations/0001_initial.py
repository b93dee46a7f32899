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
            name="Entrada",
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
                ("fornecedor", models.CharField(max_length=100)),
                ("produto_id", models.CharField(max_length=64)),
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
                            django.core.validators.MinValueValidator(Decimal("0.01"))
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
                "verbose_name": "Entrada",
                "verbose_name_plural": "Entradas",
                "db_table": "entrada",
                "ordering": ["-data"],
                "indexes": [
                    models.Index(fields=["data"], name="idx_entrada_data"),
                    models.Index(fields=["produto_id"], name="idx_entrada_produto"),
                ],
            },
        ),
    ]
