# armazenamento/ids.py

import uuid


def gerar_id() -> str:
    """
    Identificador padrão de registros (string, compatível com backups
    antigos cujos ids são timestamps em texto).
    """
    return uuid.uuid4().hex
