from django.core.management.base import BaseCommand, CommandError

from armazenamento.exceptions import ArmazenamentoError
from armazenamento.services.gerenciador_service import GerenciadorArmazenamento
from produtos.services.repositorio_service import ProdutoRepositorio


class Command(BaseCommand):
    help = (
        "Abre o armazenamento local: aplica as migrações pendentes "
        "e grava o catálogo inicial se não houver produtos."
    )

    def add_arguments(self, parser):
        parser.add_argument(
            "--database",
            default="default",
            help="Alias do banco do armazenamento (padrão: default).",
        )
        parser.add_argument(
            "--sem-catalogo",
            action="store_true",
            help="Não grava o catálogo inicial.",
        )

    def handle(self, *args, **options):
        try:
            with GerenciadorArmazenamento(alias=options["database"]) as gerenciador:
                self.stdout.write(
                    f"Armazenamento aberto (alias={gerenciador.alias}, "
                    f"versao_schema={gerenciador.versao_schema})."
                )
                if options["sem_catalogo"]:
                    return

                gravados = ProdutoRepositorio(gerenciador).semear_catalogo_inicial()
        except ArmazenamentoError as exc:
            raise CommandError(exc.mensagem) from exc

        if gravados:
            self.stdout.write(
                self.style.SUCCESS(f"Catálogo inicial gravado: {gravados} produto(s).")
            )
        else:
            self.stdout.write("Catálogo já possui produtos; nada gravado.")
