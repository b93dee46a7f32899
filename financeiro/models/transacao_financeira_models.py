# financeiro/models/transacao_financeira_models.py

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from armazenamento.ids import gerar_id


class TipoTransacao(models.TextChoices):
    ENTRADA = "Entrada", "Entrada"
    SAIDA = "Saída", "Saída"
    DESPESA_FIXA = "Despesa fixa", "Despesa fixa"
    DESPESA_VARIAVEL = "Despesa variável", "Despesa variável"


# Tipos que contam como saída de caixa no resumo.
TIPOS_SAIDA = (
    TipoTransacao.SAIDA,
    TipoTransacao.DESPESA_FIXA,
    TipoTransacao.DESPESA_VARIAVEL,
)


class CategoriaTransacao(models.TextChoices):
    VENDA = "Venda", "Venda"
    COMPRA = "Compra", "Compra"
    TRANSPORTE = "Transporte", "Transporte"
    ALUGUEL = "Aluguel", "Aluguel"
    SALARIO = "Salário", "Salário"
    IMPOSTO = "Imposto", "Imposto"
    MARKETING = "Marketing", "Marketing"
    MANUTENCAO = "Manutenção", "Manutenção"
    SERVICOS_GERAIS = "Serviços Gerais", "Serviços Gerais"
    FORNECEDORES = "Fornecedores", "Fornecedores"
    RECEITA_DIVERSA = "Receita Diversa", "Receita Diversa"
    DESPESA_DIVERSA = "Despesa Diversa", "Despesa Diversa"
    OUTROS = "Outros", "Outros"


class FormaPagamento(models.TextChoices):
    PIX = "Pix", "Pix"
    DINHEIRO = "Dinheiro", "Dinheiro"
    CARTAO_CREDITO = "Cartão de Crédito", "Cartão de Crédito"
    CARTAO_DEBITO = "Cartão de Débito", "Cartão de Débito"
    BOLETO = "Boleto", "Boleto"
    TRANSFERENCIA = "Transferência Bancária", "Transferência Bancária"
    CHEQUE = "Cheque", "Cheque"
    OUTROS = "Outros", "Outros"


class StatusTransacao(models.TextChoices):
    PAGO = "Pago", "Pago"
    EM_ABERTO = "Em aberto", "Em aberto"
    A_RECEBER = "A receber", "A receber"
    VENCIDO = "Vencido", "Vencido"
    AGENDADO = "Agendado", "Agendado"
    CANCELADO = "Cancelado", "Cancelado"


class TransacaoFinanceira(models.Model):
    """
    Lançamento do livro-caixa. Independente das vendas/estoque;
    usado apenas para totais e agrupamento mensal.
    """

    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    data = models.DateTimeField(default=timezone.now)

    tipo = models.CharField(
        max_length=20,
        choices=TipoTransacao.choices,
        default=TipoTransacao.ENTRADA,
    )
    origem_destino = models.CharField(max_length=100)
    descricao = models.CharField(max_length=200)

    valor = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )

    categoria = models.CharField(
        max_length=30,
        choices=CategoriaTransacao.choices,
        default=CategoriaTransacao.VENDA,
    )
    forma_pagamento = models.CharField(
        max_length=30,
        choices=FormaPagamento.choices,
        default=FormaPagamento.PIX,
    )
    status = models.CharField(
        max_length=20,
        choices=StatusTransacao.choices,
        default=StatusTransacao.PAGO,
    )

    observacoes = models.TextField(blank=True, default="")

    class Meta:
        db_table = "transacao_financeira"
        verbose_name = "Transação financeira"
        verbose_name_plural = "Transações financeiras"
        ordering = ["-data"]
        indexes = [
            models.Index(fields=["data"], name="idx_transacao_data"),
            models.Index(fields=["tipo"], name="idx_transacao_tipo"),
        ]

    def __str__(self) -> str:
        return f"{self.tipo} {self.valor} - {self.descricao}"

    @property
    def eh_saida(self) -> bool:
        return self.tipo in TIPOS_SAIDA
