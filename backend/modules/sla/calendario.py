"""
Calendário de dias úteis para cálculo de prazos
- Dias úteis: seg-sex (sem feriados)
- Prazo padrão: 72 horas úteis a partir da abertura ou do último encaminhamento
- Funções puras, sem acesso ao banco
"""
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from core.config import settings
from core.utils import get_timezone, now_brazil_naive, to_utc_iso

HORAS_POR_DIA = 24

DataOuDatetime = Union[date, datetime]


def _como_datetime(data: DataOuDatetime) -> datetime:
    if isinstance(data, datetime):
        return data
    return datetime.combine(data, time.min)


def _horario_local(data: datetime) -> datetime:
    """Datas com tzinfo são convertidas para o fuso local sem tzinfo"""
    if data.tzinfo is None:
        return data
    return data.astimezone(get_timezone()).replace(tzinfo=None)


def eh_dia_util(data: DataOuDatetime) -> bool:
    """Segunda a sexta (weekday 0-4)"""
    return data.weekday() < 5


def add_business_days(data: datetime, dias: int) -> datetime:
    """
    Avança um dia de calendário por vez até cruzar `dias` dias úteis.

    Sábados e domingos não contam; o horário é preservado.
    Pré-condição: dias >= 0 (dias == 0 devolve a própria data).
    """
    resultado = data
    adicionados = 0

    while adicionados < dias:
        resultado = resultado + timedelta(days=1)
        if eh_dia_util(resultado):
            adicionados += 1

    return resultado


def add_business_hours(data: datetime, horas: float) -> datetime:
    """
    Soma horas úteis: blocos de 24h viram dias úteis e o resto é somado direto.

    O resto NÃO é reavaliado contra fim de semana: uma abertura na sexta à noite
    pode ter o prazo caindo no sábado. Valores de prazo já gravados dependem
    desse comportamento.
    """
    dias = int(horas // HORAS_POR_DIA)
    horas_restantes = horas % HORAS_POR_DIA

    resultado = add_business_days(data, dias)
    return resultado + timedelta(hours=horas_restantes)


def calcular_prazo(inicio: Optional[datetime] = None) -> datetime:
    """Prazo padrão de um chamado (abertura ou encaminhamento)"""
    return add_business_hours(inicio or now_brazil_naive(), settings.PRAZO_HORAS_UTEIS)


def is_prazo_expirado(
    data_prazo: Optional[Union[datetime, str]],
    agora: Optional[datetime] = None,
) -> bool:
    """Prazo vencido quando estritamente anterior a agora; sem prazo nunca vence"""
    if not data_prazo:
        return False

    if isinstance(data_prazo, str):
        data_prazo = datetime.fromisoformat(data_prazo.replace("Z", "+00:00"))

    agora = _horario_local(agora) if agora else now_brazil_naive()
    return _horario_local(data_prazo) < agora


# ==================== Limites do dia ====================

def get_start_of_day(data: DataOuDatetime) -> datetime:
    """00:00:00.000000 no mesmo dia (nova instância)"""
    return _como_datetime(data).replace(hour=0, minute=0, second=0, microsecond=0)


def get_end_of_day(data: DataOuDatetime) -> datetime:
    """23:59:59.999999 no mesmo dia (nova instância)"""
    return _como_datetime(data).replace(hour=23, minute=59, second=59, microsecond=999999)


def get_start_of_day_iso(data: DataOuDatetime) -> str:
    return to_utc_iso(get_start_of_day(data))


def get_end_of_day_iso(data: DataOuDatetime) -> str:
    return to_utc_iso(get_end_of_day(data))


def get_today_start() -> datetime:
    return get_start_of_day(now_brazil_naive())


def get_today_end() -> datetime:
    return get_end_of_day(now_brazil_naive())
