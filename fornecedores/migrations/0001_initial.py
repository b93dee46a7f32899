import django.utils.timezone
from django.db import migrations, models

import armazenamento.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Fornecedor",
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
                    "data_cadastro",
                    models.DateTimeField(default=django.utils.timezone.now),
                ),
                ("nome", models.CharField(max_length=100)),
                ("endereco", models.CharField(blank=True, default="", max_length=150)),
                ("bairro", models.CharField(blank=True, default="", max_length=100)),
                ("cidade", models.CharField(blank=True, default="", max_length=100)),
                ("telefone", models.CharField(blank=True, default="", max_length=20)),
                (
                    "produtos_fornecidos",
                    models.TextField(
                        blank=True,
                        default="",
                        help_text="Produtos que o fornecedor entrega (texto livre).",
                    ),
                ),
            ],
            options={
                "verbose_name": "Fornecedor",
                "verbose_name_plural": "Fornecedores",
                "db_table": "fornecedor",
                "ordering": ["nome"],
                "indexes": [
                    models.Index(fields=["nome"], name="idx_fornecedor_nome"),
                ],
            },
        ),
    ]
