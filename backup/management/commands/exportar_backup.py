from pathlib import Path

from django.core.management.base import BaseCommand

from backup.services.backup_service import (
    exportar,
    nome_arquivo_backup,
    serializar_backup,
)


class Command(BaseCommand):
    help = "Exporta todas as coleções para um arquivo JSON de backup."

    def add_arguments(self, parser):
        parser.add_argument(
            "--destino",
            default=".",
            help="Diretório onde o arquivo será gravado (padrão: atual).",
        )

    def handle(self, *args, **options):
        destino = Path(options["destino"])
        destino.mkdir(parents=True, exist_ok=True)

        caminho = destino / nome_arquivo_backup()
        caminho.write_text(serializar_backup(exportar()), encoding="utf-8")

        self.stdout.write(self.style.SUCCESS(f"Backup gravado em {caminho}."))
