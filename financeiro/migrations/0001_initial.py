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
            name="TransacaoFinanceira",
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
                    "tipo",
                    models.CharField(
                        choices=[
                            ("Entrada", "Entrada"),
                            ("Saída", "Saída"),
                            ("Despesa fixa", "Despesa fixa"),
                            ("Despesa variável", "Despesa variável"),
                        ],
                        default="Entrada",
                        max_length=20,
                    ),
                ),
                ("origem_destino", models.CharField(max_length=100)),
                ("descricao", models.CharField(max_length=200)),
                (
                    "valor",
                    models.DecimalField(
                        decimal_places=2,
                        max_digits=12,
                        validators=[
                            django.core.validators.MinValueValidator(Decimal("0.01"))
                        ],
                    ),
                ),
                (
                    "categoria",
                    models.CharField(
                        choices=[
                            ("Venda", "Venda"),
                            ("Compra", "Compra"),
                            ("Transporte", "Transporte"),
                            ("Aluguel", "Aluguel"),
                            ("Salário", "Salário"),
                            ("Imposto", "Imposto"),
                            ("Marketing", "Marketing"),
                            ("Manutenção", "Manutenção"),
                            ("Serviços Gerais", "Serviços Gerais"),
                            ("Fornecedores", "Fornecedores"),
                            ("Receita Diversa", "Receita Diversa"),
                            ("Despesa Diversa", "Despesa Diversa"),
                            ("Outros", "Outros"),
                        ],
                        default="Venda",
                        max_length=30,
                    ),
                ),
                (
                    "forma_pagamento",
                    models.CharField(
                        choices=[
                            ("Pix", "Pix"),
                            ("Dinheiro", "Dinheiro"),
                            ("Cartão de Crédito", "Cartão de Crédito"),
                            ("Cartão de Débito", "Cartão de Débito"),
                            ("Boleto", "Boleto"),
                            ("Transferência Bancária", "Transferência Bancária"),
                            ("Cheque", "Cheque"),
                            ("Outros", "Outros"),
                        ],
                        default="Pix",
                        max_length=30,
                    ),
                ),
                (
                    "status",
                    models.CharField(
                        choices=[
                            ("Pago", "Pago"),
                            ("Em aberto", "Em aberto"),
                            ("A receber", "A receber"),
                            ("Vencido", "Vencido"),
                            ("Agendado", "Agendado"),
                            ("Cancelado", "Cancelado"),
                        ],
                        default="Pago",
                        max_length=20,
                    ),
                ),
                ("observacoes", models.TextField(blank=True, default="")),
            ],
            options={
                "verbose_name": "Transação financeira",
                "verbose_name_plural": "Transações financeiras",
                "db_table": "transacao_financeira",
                "ordering": ["-data"],
                "indexes": [
                    models.Index(fields=["data"], name="idx_transacao_data"),
                    models.Index(fields=["tipo"], name="idx_transacao_tipo"),
                ],
            },
        ),
    ]
