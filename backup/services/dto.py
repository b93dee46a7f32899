# backup/services/dto.py

from dataclasses import dataclass, fields
from typing import List, Optional

# Ordem fixa de exportação e restauração.
COLECOES_BACKUP = (
    "produtos",
    "entradas",
    "vendas",
    "clientes",
    "fornecedores",
    "transacoes_financeiras",
)


@dataclass
class DadosBackup:
    """
    Snapshot das coleções. None = coleção ausente do backup
    (a restauração não toca nela); lista vazia = coleção vazia.
    """

    produtos: Optional[List] = None
    entradas: Optional[List] = None
    vendas: Optional[List] = None
    clientes: Optional[List] = None
    fornecedores: Optional[List] = None
    transacoes_financeiras: Optional[List] = None

    def colecoes_presentes(self) -> List[str]:
        return [f.name for f in fields(self) if getattr(self, f.name) is not None]
