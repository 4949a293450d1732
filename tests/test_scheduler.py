import pytest

from modules.sla.scheduler import SchedulerSLA


@pytest.fixture
def scheduler():
    scheduler = SchedulerSLA()
    try:
        yield scheduler
    finally:
        scheduler.parar()


def test_status_before_start(scheduler):
    status = scheduler.get_status()
    assert status["running"] is False
    assert status["last_execution"] is None


def test_manual_execution_records_result(scheduler, session_factory, criar_chamado, prazo_vencido):
    criar_chamado(data_prazo=prazo_vencido)

    resultado = scheduler.executar_manualmente(session_factory)

    assert resultado.notificacoes_enviadas == 1
    assert scheduler.ultimo_resultado is resultado
    assert scheduler.get_status()["last_result"] == {
        "chamados_verificados": 1,
        "notificacoes_enviadas": 1,
        "falhas": 0,
    }


def test_tick_failure_is_logged_not_raised(scheduler, caplog):
    def fabrica_quebrada():
        raise RuntimeError("sem conexão")

    assert scheduler._verificar_prazos(fabrica_quebrada) is None
    assert "Erro ao verificar prazos" in caplog.text


def test_start_runs_first_sweep_and_schedules_job(scheduler, session_factory, criar_chamado, prazo_vencido):
    criar_chamado(data_prazo=prazo_vencido)

    scheduler.iniciar(session_factory, update_interval=60)

    status = scheduler.get_status()
    assert status["running"] is True
    assert status["interval_minutes"] == 60
    assert status["next_run"] is not None
    assert status["last_result"]["notificacoes_enviadas"] == 1

    scheduler.parar()
    assert scheduler.is_running is False


def test_start_twice_is_noop(scheduler, session_factory):
    scheduler.iniciar(session_factory, update_interval=60)
    primeiro = scheduler.scheduler

    scheduler.iniciar(session_factory, update_interval=60)

    assert scheduler.scheduler is primeiro
