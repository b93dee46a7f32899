# armazenamento/datas.py

from __future__ import annotations

from datetime import date, datetime, time
from typing import Iterable

from django.utils import timezone
from django.utils.dateparse import parse_date, parse_datetime


def normalizar_data(valor):
    """
    Converte uma data vinda do armazenamento/backup para datetime aware.

    Aceita:
    - datetime (naive vira aware no fuso padrão);
    - date (meia-noite no fuso padrão);
    - string ISO-8601 (com ou sem hora; sufixo 'Z' aceito).
    None é devolvido como None.
    """
    if valor is None or valor == "":
        return None

    if isinstance(valor, datetime):
        dt = valor
    elif isinstance(valor, date):
        dt = datetime.combine(valor, time.min)
    elif isinstance(valor, str):
        texto = valor.strip()
        if texto.endswith("Z"):
            texto = texto[:-1] + "+00:00"
        dt = parse_datetime(texto)
        if dt is None:
            d = parse_date(texto)
            if d is None:
                raise ValueError(f"Data inválida: {valor!r}")
            dt = datetime.combine(d, time.min)
    else:
        raise TypeError(f"Tipo de data não suportado: {type(valor).__name__}")

    if timezone.is_naive(dt):
        dt = timezone.make_aware(dt, timezone.get_default_timezone())
    return dt


def normalizar_campos_data(item, campos: Iterable[str]):
    """
    Normaliza, in-place, os campos de data de uma instância de model
    ou de um dict. Retorna o próprio item.
    """
    for campo in campos:
        if isinstance(item, dict):
            if campo in item:
                item[campo] = normalizar_data(item[campo])
        elif hasattr(item, campo):
            setattr(item, campo, normalizar_data(getattr(item, campo)))
    return item
