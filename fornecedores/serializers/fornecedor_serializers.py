# fornecedores/serializers/fornecedor_serializers.py

from rest_framework import serializers

from fornecedores.models import Fornecedor


class FornecedorSerializer(serializers.ModelSerializer):
    class Meta:
        model = Fornecedor
        fields = [
            "id",
            "data_cadastro",
            "nome",
            "endereco",
            "bairro",
            "cidade",
            "telefone",
            "produtos_fornecidos",
        ]
        # chave duplicada é tratada pelo armazenamento (409)
        extra_kwargs = {"id": {"required": False, "validators": []}}
