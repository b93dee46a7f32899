# estoque/models/entrada_models.py

from decimal import Decimal, ROUND_HALF_UP

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from armazenamento.ids import gerar_id


class Entrada(models.Model):
    """
    Entrada de mercadoria: soma `quantidade` ao estoque do produto.
    `produto_nome` é cópia do nome no momento da entrada.
    """

    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    data = models.DateTimeField(default=timezone.now)

    fornecedor = models.CharField(max_length=100)

    produto_id = models.CharField(max_length=64)
    produto_nome = models.CharField(max_length=150, blank=True, default="")

    quantidade = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    preco_unitario = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.01"))],
    )
    valor_total = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    class Meta:
        db_table = "entrada"
        verbose_name = "Entrada"
        verbose_name_plural = "Entradas"
        ordering = ["-data"]
        indexes = [
            models.Index(fields=["data"], name="idx_entrada_data"),
            models.Index(fields=["produto_id"], name="idx_entrada_produto"),
        ]

    def __str__(self) -> str:
        return f"Entrada {self.id} - {self.quantidade}x {self.produto_nome}"

    @staticmethod
    def calcular_total(quantidade, preco_unitario) -> Decimal:
        return (Decimal(quantidade) * Decimal(preco_unitario)).quantize(
            Decimal("0.01"), rounding=ROUND_HALF_UP
        )
