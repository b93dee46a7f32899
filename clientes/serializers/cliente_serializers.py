# clientes/serializers/cliente_serializers.py

from rest_framework import serializers

from clientes.models import Cliente


class ClienteSerializer(serializers.ModelSerializer):
    nome_exibicao = serializers.CharField(read_only=True)

    class Meta:
        model = Cliente
        fields = [
            "id",
            "data_cadastro",
            "razao_social",
            "nome_fantasia",
            "categoria",
            "endereco",
            "bairro",
            "cidade",
            "telefone",
            "nome_exibicao",
        ]
        # chave duplicada é tratada pelo armazenamento (409)
        extra_kwargs = {"id": {"required": False, "validators": []}}
