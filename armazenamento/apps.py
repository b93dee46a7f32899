from django.apps import AppConfig


class ArmazenamentoConfig(AppConfig):
    name = "armazenamento"
    verbose_name = "Armazenamento local"
