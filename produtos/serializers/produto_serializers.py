# produtos/serializers/produto_serializers.py

from decimal import Decimal

from rest_framework import serializers

from produtos.models import Produto


class ProdutoSerializer(serializers.ModelSerializer):
    em_estoque = serializers.BooleanField(read_only=True)

    class Meta:
        model = Produto
        fields = [
            "id",
            "nome",
            "descricao",
            "preco",
            "estoque",
            "categoria",
            "imagem_url",
            "dica_imagem",
            "em_estoque",
        ]
        extra_kwargs = {
            # chave duplicada é tratada pelo armazenamento (409)
            "id": {"required": False, "validators": []},
            "preco": {"required": True, "min_value": Decimal("0.01")},
        }
