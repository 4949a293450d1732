from datetime import date, datetime, timedelta, timezone

import pytest

from core.config import settings
from modules.sla.calendario import (
    add_business_days,
    add_business_hours,
    calcular_prazo,
    get_end_of_day,
    get_end_of_day_iso,
    get_start_of_day,
    get_start_of_day_iso,
    get_today_end,
    get_today_start,
    is_prazo_expirado,
)

# 2024-01-01 é uma segunda-feira
SEGUNDA = datetime(2024, 1, 1, 10, 30)
SEXTA = datetime(2024, 1, 5, 20, 0)
SABADO = datetime(2024, 1, 6, 9, 0)


@pytest.fixture
def fuso_sao_paulo(monkeypatch):
    monkeypatch.setattr(settings, "TIMEZONE", "America/Sao_Paulo")


def test_add_business_days_zero_returns_same_instant():
    assert add_business_days(SEGUNDA, 0) == SEGUNDA
    assert add_business_days(SABADO, 0) == SABADO


def test_add_business_days_skips_weekend():
    assert add_business_days(SEXTA, 1) == datetime(2024, 1, 8, 20, 0)
    assert add_business_days(SABADO, 1) == datetime(2024, 1, 8, 9, 0)
    assert add_business_days(SEGUNDA, 5) == datetime(2024, 1, 8, 10, 30)


@pytest.mark.parametrize("offset", range(7))
@pytest.mark.parametrize("dias", [1, 2, 3, 4, 5, 9, 12])
def test_add_business_days_never_lands_on_weekend(offset, dias):
    inicio = SEGUNDA + timedelta(days=offset)
    resultado = add_business_days(inicio, dias)
    assert resultado.weekday() < 5
    assert resultado.time() == inicio.time()


def test_add_business_days_does_not_mutate_input():
    original = datetime(2024, 1, 1, 8, 0)
    add_business_days(original, 3)
    assert original == datetime(2024, 1, 1, 8, 0)


def test_72_business_hours_from_monday_lands_on_thursday_same_time():
    prazo = add_business_hours(SEGUNDA, 72)
    assert prazo == datetime(2024, 1, 4, 10, 30)
    assert prazo.weekday() == 3


def test_72_business_hours_from_friday_skips_weekend():
    assert add_business_hours(SEXTA, 72) == datetime(2024, 1, 10, 20, 0)


def test_remainder_hours_are_added_without_weekend_check():
    # 10h a partir de sexta 20:00 cai no sábado; comportamento preservado
    assert add_business_hours(SEXTA, 10) == datetime(2024, 1, 6, 6, 0)


def test_remainder_combined_with_whole_days():
    assert add_business_hours(SEGUNDA, 30) == datetime(2024, 1, 2, 16, 30)


def test_calcular_prazo_uses_configured_policy():
    assert calcular_prazo(SEGUNDA) == add_business_hours(SEGUNDA, settings.PRAZO_HORAS_UTEIS)


def test_is_prazo_expirado():
    agora = datetime(2024, 1, 10, 12, 0)
    assert is_prazo_expirado(None) is False
    assert is_prazo_expirado(datetime(2024, 1, 10, 11, 59), agora) is True
    assert is_prazo_expirado(datetime(2024, 1, 10, 12, 1), agora) is False
    # estritamente menor
    assert is_prazo_expirado(agora, agora) is False


def test_is_prazo_expirado_against_current_time():
    assert is_prazo_expirado(datetime(2000, 1, 1)) is True
    assert is_prazo_expirado(datetime(2100, 1, 1)) is False
    assert is_prazo_expirado(datetime(2000, 1, 1, tzinfo=timezone.utc)) is True


def test_is_prazo_expirado_accepts_iso_strings():
    assert is_prazo_expirado("2000-01-01T00:00:00.000Z") is True
    assert is_prazo_expirado("2100-01-01T00:00:00+00:00") is False


def test_is_prazo_expirado_mixes_utc_deadline_with_local_now(fuso_sao_paulo):
    agora = datetime(2024, 1, 10, 12, 0)
    # 14:59Z == 11:59 em São Paulo
    assert is_prazo_expirado("2024-01-10T14:59:00.000Z", agora) is True
    assert is_prazo_expirado("2024-01-10T15:01:00Z", agora) is False
    assert is_prazo_expirado(datetime(2024, 1, 10, 15, 0, tzinfo=timezone.utc), agora) is False


def test_is_prazo_expirado_local_deadline_with_utc_now(fuso_sao_paulo):
    agora = datetime(2024, 1, 10, 15, 0, tzinfo=timezone.utc)
    assert is_prazo_expirado(datetime(2024, 1, 10, 11, 59), agora) is True
    assert is_prazo_expirado(datetime(2024, 1, 10, 12, 1), agora) is False


def test_start_and_end_of_day_bracket_the_day():
    referencia = datetime(2024, 3, 15, 14, 45, 12, 345)
    inicio = get_start_of_day(referencia)
    fim = get_end_of_day(referencia)

    assert inicio == datetime(2024, 3, 15, 0, 0, 0, 0)
    assert fim == datetime(2024, 3, 15, 23, 59, 59, 999999)
    assert referencia == datetime(2024, 3, 15, 14, 45, 12, 345)

    for hora in (0, 6, 12, 23):
        instante = datetime(2024, 3, 15, hora, 59, 59)
        assert inicio <= instante <= fim
    assert not inicio <= datetime(2024, 3, 16, 0, 0) <= fim


def test_start_and_end_of_day_accept_dates():
    assert get_start_of_day(date(2024, 3, 15)) == datetime(2024, 3, 15)
    assert get_end_of_day(date(2024, 3, 15)) == datetime(2024, 3, 15, 23, 59, 59, 999999)


def test_day_bounds_serialized_in_utc(fuso_sao_paulo):
    referencia = datetime(2024, 3, 15, 14, 30)
    assert get_start_of_day_iso(referencia) == "2024-03-15T03:00:00.000Z"
    assert get_end_of_day_iso(referencia) == "2024-03-16T02:59:59.999Z"


def test_today_bounds():
    inicio = get_today_start()
    fim = get_today_end()
    assert inicio.date() == fim.date()
    assert inicio.time().hour == 0
    assert fim - inicio == timedelta(hours=23, minutes=59, seconds=59, microseconds=999999)
