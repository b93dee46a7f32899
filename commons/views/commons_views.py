from django.db import DatabaseError
from django.http import JsonResponse

from armazenamento.exceptions import ArmazenamentoError
from armazenamento.services.gerenciador_service import obter_gerenciador


def liveness(request):
    return JsonResponse({"ok": True})


def readiness(request):
    """
    Pronto = armazenamento aberto e schema na versão alvo.
    """
    try:
        gerenciador = obter_gerenciador().garantir_aberto()
        with gerenciador.conexao.cursor() as cur:
            cur.execute("SELECT 1")
            cur.fetchone()
    except (ArmazenamentoError, DatabaseError) as e:
        return JsonResponse(
            {"ok": False, "error": getattr(e, "mensagem", str(e))}, status=503
        )
    return JsonResponse(
        {
            "ok": True,
            "versao_schema": gerenciador.versao_schema,
            "versao_alvo": gerenciador.versao_alvo,
        }
    )

