# carrinho/models/espelho_sessao_models.py

from django.db import models


class EspelhoSessao(models.Model):
    """
    Espelho chave/valor do estado do carrinho entre reinícios.
    Cada chave guarda um documento JSON sobrescrito por inteiro a cada mutação.
    """

    chave = models.CharField(primary_key=True, max_length=64)
    valor = models.JSONField(null=True, blank=True)
    atualizado_em = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "espelho_sessao"
        verbose_name = "Espelho de sessão"
        verbose_name_plural = "Espelhos de sessão"

    def __str__(self) -> str:
        return self.chave
