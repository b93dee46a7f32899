# vendas/models/venda_models.py

from decimal import Decimal, ROUND_HALF_UP

from django.core.validators import MinValueValidator
from django.db import models
from django.utils import timezone

from armazenamento.ids import gerar_id

CENTAVOS = Decimal("0.01")


class Venda(models.Model):
    """
    Representa uma saída (venda) de um produto para um cliente.

    Pilares:
    - Criada junto com a baixa de estoque do produto; excluída junto com a
      devolução da mesma quantidade ao estoque.
    - `cliente_nome` e `produto_nome` são cópias do momento da venda (evitam
      junção na listagem) e podem divergir do cadastro atual.
    - `cliente_id`/`produto_id` são referências simples: a venda é um fato
      histórico e continua existindo se o produto for removido.
    """

    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    data = models.DateTimeField(default=timezone.now)

    cliente_id = models.CharField(max_length=64, help_text="Cliente da venda.")
    cliente_nome = models.CharField(max_length=150, blank=True, default="")

    produto_id = models.CharField(max_length=64, help_text="Produto vendido.")
    produto_nome = models.CharField(max_length=150, blank=True, default="")

    quantidade = models.PositiveIntegerField(
        validators=[MinValueValidator(1)],
    )
    preco_unitario = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    desconto = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
    )
    valor_total = models.DecimalField(
        max_digits=12, decimal_places=2, default=Decimal("0.00")
    )

    class Meta:
        db_table = "venda"
        verbose_name = "Venda"
        verbose_name_plural = "Vendas"
        ordering = ["-data"]
        indexes = [
            models.Index(fields=["data"], name="idx_venda_data"),
            models.Index(fields=["produto_id"], name="idx_venda_produto"),
            models.Index(fields=["cliente_id"], name="idx_venda_cliente"),
        ]

    def __str__(self) -> str:
        return f"Venda {self.id} - {self.quantidade}x {self.produto_nome}"

    @staticmethod
    def calcular_total(quantidade, preco_unitario, desconto) -> Decimal:
        """
        total = quantidade * preco_unitario - desconto, nunca abaixo de zero.
        """
        bruto = Decimal(quantidade) * Decimal(preco_unitario)
        total = bruto - Decimal(desconto or 0)
        if total < 0:
            total = Decimal("0.00")
        return total.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
