from __future__ import annotations
from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from core.config import settings


def get_timezone() -> ZoneInfo:
    """Fuso horário local usado no calendário de dias úteis"""
    return ZoneInfo(settings.TIMEZONE)


def now_brazil_naive() -> datetime:
    """Agora no fuso local, sem tzinfo (formato gravado no banco)"""
    return datetime.now(get_timezone()).replace(tzinfo=None)


def to_utc_iso(data: datetime) -> str:
    """
    Serializa em ISO-8601 UTC com milissegundos, ex: 2026-03-02T03:00:00.000Z.
    Datas sem tzinfo são interpretadas no fuso local.
    """
    if data.tzinfo is None:
        data = data.replace(tzinfo=get_timezone())
    utc = data.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")
