import django.utils.timezone
from django.db import migrations, models

import armazenamento.ids


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Cliente",
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
                ("razao_social", models.CharField(max_length=150)),
                (
                    "nome_fantasia",
                    models.CharField(blank=True, default="", max_length=100),
                ),
                ("categoria", models.CharField(blank=True, default="", max_length=50)),
                ("endereco", models.CharField(blank=True, default="", max_length=150)),
                ("bairro", models.CharField(blank=True, default="", max_length=100)),
                ("cidade", models.CharField(blank=True, default="", max_length=100)),
                ("telefone", models.CharField(blank=True, default="", max_length=20)),
            ],
            options={
                "verbose_name": "Cliente",
                "verbose_name_plural": "Clientes",
                "db_table": "cliente",
                "indexes": [
                    models.Index(
                        fields=["nome_fantasia"], name="idx_cliente_nome_fantasia"
                    ),
                    models.Index(
                        fields=["razao_social"], name="idx_cliente_razao_social"
                    ),
                ],
            },
        ),
    ]
