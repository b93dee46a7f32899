# financeiro/serializers/transacao_financeira_serializers.py

from rest_framework import serializers

from financeiro.models import (
    CategoriaTransacao,
    StatusTransacao,
    TipoTransacao,
    TransacaoFinanceira,
)


class TransacaoFinanceiraSerializer(serializers.ModelSerializer):
    class Meta:
        model = TransacaoFinanceira
        fields = [
            "id",
            "data",
            "tipo",
            "origem_destino",
            "descricao",
            "valor",
            "categoria",
            "forma_pagamento",
            "status",
            "observacoes",
        ]
        # chave duplicada é tratada pelo armazenamento (409)
        extra_kwargs = {"id": {"required": False, "validators": []}}


class FiltroResumoSerializer(serializers.Serializer):
    """
    Filtros do resumo (query string). Todos opcionais.
    """

    inicio = serializers.DateField(required=False)
    fim = serializers.DateField(required=False)
    tipo = serializers.ChoiceField(choices=TipoTransacao.choices, required=False)
    categoria = serializers.ChoiceField(
        choices=CategoriaTransacao.choices, required=False
    )
    status = serializers.ChoiceField(choices=StatusTransacao.choices, required=False)

    def validate(self, attrs):
        inicio, fim = attrs.get("inicio"), attrs.get("fim")
        if inicio and fim and inicio > fim:
            raise serializers.ValidationError(
                {"fim": "Data final não pode ser anterior à inicial."}
            )
        return attrs


class ResumoMensalSerializer(serializers.Serializer):
    mes = serializers.CharField()
    entradas = serializers.DecimalField(max_digits=14, decimal_places=2)
    saidas = serializers.DecimalField(max_digits=14, decimal_places=2)


class ResumoFinanceiroSerializer(serializers.Serializer):
    total_entradas = serializers.DecimalField(max_digits=14, decimal_places=2)
    total_saidas = serializers.DecimalField(max_digits=14, decimal_places=2)
    saldo = serializers.DecimalField(max_digits=14, decimal_places=2)
    quantidade = serializers.IntegerField()
    meses = ResumoMensalSerializer(many=True)
