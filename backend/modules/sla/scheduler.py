"""
Scheduler automático para verificar prazos expirados
Usa APScheduler para executar em background
"""
import logging
from datetime import datetime
from typing import Callable, Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger
from sqlalchemy.orm import Session

from core.config import settings
from core.utils import now_brazil_naive
from .verificador import ResultadoVerificacao, VerificadorPrazos

logger = logging.getLogger("sla.scheduler")

SessionFactory = Callable[[], Session]


class SchedulerSLA:
    """Gerenciador de scheduler para a verificação periódica de prazos"""

    def __init__(self):
        self.scheduler: Optional[BackgroundScheduler] = None
        self.is_running = False
        self.job_id = "sla_verificar_prazos_job"
        self.update_interval_minutes = settings.SCHEDULER_INTERVAL_MINUTES
        self.ultima_execucao: Optional[datetime] = None
        self.ultimo_resultado: Optional[ResultadoVerificacao] = None

    def iniciar(self, db_session_factory: SessionFactory, update_interval: Optional[int] = None):
        """
        Inicia o scheduler

        Args:
            db_session_factory: Factory para criar sessões de banco
            update_interval: Intervalo em minutos (padrão: SLA_SCHEDULER_INTERVAL_MINUTES)
        """
        if self.is_running:
            logger.warning("Scheduler SLA já está em execução")
            return

        self.update_interval_minutes = update_interval or settings.SCHEDULER_INTERVAL_MINUTES
        self.scheduler = BackgroundScheduler()

        # Execuções podem se sobrepor; não há fila nem cancelamento
        self.scheduler.add_job(
            func=self._verificar_prazos,
            trigger=IntervalTrigger(minutes=self.update_interval_minutes),
            id=self.job_id,
            name="Verificação de prazos expirados",
            replace_existing=True,
            max_instances=3,
            coalesce=False,
            kwargs={"db_session_factory": db_session_factory},
        )

        self.scheduler.start()
        self.is_running = True
        logger.info(f"Scheduler SLA iniciado (intervalo: {self.update_interval_minutes}m)")

        # Executa a primeira verificação imediatamente
        self._verificar_prazos(db_session_factory)

    def parar(self):
        """Para o scheduler"""
        if self.scheduler and self.is_running:
            self.scheduler.shutdown(wait=False)
            self.is_running = False
            logger.info("Scheduler SLA parado")

    def _verificar_prazos(self, db_session_factory: SessionFactory) -> Optional[ResultadoVerificacao]:
        """
        Função executada a cada tick.
        Erros são apenas registrados; o próximo tick tenta novamente.
        """
        try:
            return self.executar_manualmente(db_session_factory)
        except Exception as e:
            logger.error(f"Erro ao verificar prazos: {e}", exc_info=True)
            return None

    def executar_manualmente(self, db_session_factory: SessionFactory) -> ResultadoVerificacao:
        """Executa uma verificação imediata (botão no frontend ou tick)"""
        inicio = now_brazil_naive()
        db = db_session_factory()
        try:
            resultado = VerificadorPrazos(db).verificar_chamados_expirados()
        finally:
            db.close()

        self.ultima_execucao = inicio
        self.ultimo_resultado = resultado
        tempo_ms = (now_brazil_naive() - inicio).total_seconds() * 1000
        logger.info(
            f"Verificação concluída em {tempo_ms:.0f}ms: "
            f"{resultado.chamados_verificados} chamados, {resultado.notificacoes_enviadas} notificações"
        )
        return resultado

    def get_status(self) -> dict:
        """Retorna status do scheduler"""
        ultima = {
            "last_execution": self.ultima_execucao.isoformat() if self.ultima_execucao else None,
            "last_result": self.ultimo_resultado.to_dict() if self.ultimo_resultado else None,
        }

        if not self.scheduler:
            return {"running": False, "message": "Scheduler não iniciado", **ultima}

        job = self.scheduler.get_job(self.job_id)
        if not job:
            return {"running": False, "message": "Job não encontrado", **ultima}

        return {
            "running": self.is_running,
            "job_id": self.job_id,
            "interval_minutes": self.update_interval_minutes,
            "next_run": job.next_run_time.isoformat() if job.next_run_time else None,
            **ultima,
        }


# Instância global
_scheduler: Optional[SchedulerSLA] = None


def get_scheduler() -> SchedulerSLA:
    """Obtém ou cria scheduler global"""
    global _scheduler
    if _scheduler is None:
        _scheduler = SchedulerSLA()
    return _scheduler


def iniciar_scheduler(db_session_factory: SessionFactory, update_interval: Optional[int] = None) -> SchedulerSLA:
    """Inicia scheduler global"""
    scheduler = get_scheduler()
    scheduler.iniciar(db_session_factory, update_interval)
    return scheduler


def parar_scheduler():
    """Para scheduler global"""
    scheduler = get_scheduler()
    scheduler.parar()
