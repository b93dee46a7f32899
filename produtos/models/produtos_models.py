# produtos/models/produtos_models.py

from decimal import Decimal

from django.core.validators import MinValueValidator
from django.db import models

from armazenamento.ids import gerar_id


class Produto(models.Model):
    """
    Cadastro de produtos do catálogo.

    Pontos importantes:
    - `estoque` nunca fica negativo (PositiveIntegerField + regra de venda).
    - Estoque só muda por venda (criação/exclusão), entrada de mercadoria
      ou edição manual do cadastro.
    """

    id = models.CharField(primary_key=True, max_length=64, default=gerar_id)

    nome = models.CharField(
        max_length=150,
        help_text="Nome do produto exibido no catálogo.",
    )
    descricao = models.TextField(
        blank=True,
        default="",
        help_text="Descrição opcional do produto.",
    )

    preco = models.DecimalField(
        max_digits=12,
        decimal_places=2,
        default=Decimal("0.00"),
        validators=[MinValueValidator(Decimal("0.00"))],
        help_text="Preço unitário de venda.",
    )

    estoque = models.PositiveIntegerField(
        default=0,
        help_text="Quantidade disponível em estoque.",
    )

    categoria = models.CharField(max_length=80, blank=True, default="")

    # Foto para o app
    imagem_url = models.CharField(
        max_length=500,
        blank=True,
        default="",
        help_text="Caminho/URL da imagem do produto.",
    )
    dica_imagem = models.CharField(
        max_length=100,
        blank=True,
        default="",
        help_text="Palavras-chave para busca de imagem.",
    )

    class Meta:
        db_table = "produto"
        verbose_name = "Produto"
        verbose_name_plural = "Produtos"
        ordering = ["nome"]
        indexes = [
            models.Index(fields=["nome"], name="idx_prod_nome"),
            models.Index(fields=["categoria"], name="idx_prod_categoria"),
        ]

    def __str__(self) -> str:
        return f"{self.id} - {self.nome}"

    @property
    def em_estoque(self) -> bool:
        return self.estoque > 0
