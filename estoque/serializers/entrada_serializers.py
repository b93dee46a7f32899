# estoque/serializers/entrada_serializers.py

from decimal import Decimal

from rest_framework import serializers

from estoque.models import Entrada
from estoque.services.entrada_service import DadosEntrada


class EntradaSerializer(serializers.ModelSerializer):
    class Meta:
        model = Entrada
        fields = [
            "id",
            "data",
            "fornecedor",
            "produto_id",
            "produto_nome",
            "quantidade",
            "preco_unitario",
            "valor_total",
        ]
        read_only_fields = ["produto_nome", "valor_total"]
        # chave duplicada é tratada pelo armazenamento (409)
        extra_kwargs = {"id": {"required": False, "validators": []}}


class RegistrarEntradaSerializer(serializers.Serializer):
    id = serializers.CharField(max_length=64, required=False)
    produto_id = serializers.CharField(max_length=64)
    fornecedor = serializers.CharField(max_length=100)
    quantidade = serializers.IntegerField(min_value=1)
    preco_unitario = serializers.DecimalField(
        max_digits=12, decimal_places=2, min_value=Decimal("0.01")
    )
    data = serializers.DateTimeField(required=False, allow_null=True)

    def para_dados(self) -> DadosEntrada:
        return DadosEntrada(**self.validated_data)
