from pathlib import Path

from django.core.management.base import BaseCommand, CommandError

from backup.services.backup_service import carregar_backup, restaurar
from backup.services.exceptions import BackupError


class Command(BaseCommand):
    help = (
        "Restaura um arquivo de backup. Substitui o conteúdo das coleções "
        "presentes no arquivo."
    )

    def add_arguments(self, parser):
        parser.add_argument("arquivo", help="Caminho do arquivo JSON de backup.")

    def handle(self, *args, **options):
        caminho = Path(options["arquivo"])
        if not caminho.is_file():
            raise CommandError(f"Arquivo não encontrado: {caminho}")

        try:
            restauradas = restaurar(carregar_backup(caminho.read_bytes()))
        except BackupError as exc:
            raise CommandError(exc.mensagem) from exc

        self.stdout.write(
            self.style.SUCCESS(
                f"Backup restaurado. Coleções: {', '.join(restauradas) or 'nenhuma'}."
            )
        )
