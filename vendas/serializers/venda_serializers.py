# vendas/serializers/venda_serializers.py

from decimal import Decimal

from rest_framework import serializers

from vendas.models import Venda
from vendas.services.dto import DadosVenda


class VendaSerializer(serializers.ModelSerializer):
    class Meta:
        model = Venda
        fields = [
            "id",
            "data",
            "cliente_id",
            "cliente_nome",
            "produto_id",
            "produto_nome",
            "quantidade",
            "preco_unitario",
            "desconto",
            "valor_total",
        ]
        read_only_fields = ["cliente_nome", "produto_nome", "valor_total"]
        # chave duplicada é tratada pelo armazenamento (409)
        extra_kwargs = {"id": {"required": False, "validators": []}}


class RegistrarVendaSerializer(serializers.Serializer):
    """
    Formulário de saída. Nomes e total são calculados pelo serviço.
    """

    id = serializers.CharField(max_length=64, required=False)
    produto_id = serializers.CharField(max_length=64)
    cliente_id = serializers.CharField(max_length=64)
    quantidade = serializers.IntegerField(min_value=1)
    preco_unitario = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        allow_null=True,
    )
    desconto = serializers.DecimalField(
        max_digits=12,
        decimal_places=2,
        min_value=Decimal("0.00"),
        required=False,
        default=Decimal("0.00"),
    )
    data = serializers.DateTimeField(required=False, allow_null=True)

    def para_dados(self) -> DadosVenda:
        return DadosVenda(**self.validated_data)
