from __future__ import annotations
import logging
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

from fastapi import FastAPI, Depends
from sqlalchemy import text
from sqlalchemy.orm import Session

from core.config import settings
from core.cors import CORSComRotasPublicas
from core.db import Base, SessionLocal, engine, get_db
from modules.sla.router import CAMINHO_VERIFICACAO, router as sla_router
from modules.sla.scheduler import iniciar_scheduler, parar_scheduler
from ti.api import (
    chamados_router,
    configuracoes_router,
    links_uteis_router,
    notificacoes_router,
    relatorios_router,
    scripts_router,
)
import ti.models  # noqa: F401  registra as tabelas no metadata

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger("main")

app = FastAPI(title="Sistema de Chamados - API", version="1.0.0")

# A verificação de prazos é chamada por agendadores externos e trata o próprio CORS
app.add_middleware(
    CORSComRotasPublicas,
    rotas_publicas=[f"/api{sla_router.prefix}{CAMINHO_VERIFICACAO}"],
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/api/ping")
def ping():
    return {"message": "pong"}


@app.get("/api/health")
def health_check(db: Session = Depends(get_db)):
    try:
        db.execute(text("SELECT 1"))
        return {"status": "ok", "database": "connected"}
    except Exception as e:
        logger.error(f"Database health check failed: {e}", exc_info=True)
        return {"status": "error", "database": str(e)}


# Other routers with /api prefix
app.include_router(chamados_router, prefix="/api")
app.include_router(notificacoes_router, prefix="/api")
app.include_router(configuracoes_router, prefix="/api")
app.include_router(relatorios_router, prefix="/api")
app.include_router(scripts_router, prefix="/api")
app.include_router(links_uteis_router, prefix="/api")
app.include_router(sla_router, prefix="/api")


@app.on_event("startup")
def startup_event():
    """Cria tabelas e inicia a verificação periódica de prazos"""
    Base.metadata.create_all(bind=engine)
    logger.info("[STARTUP] Tabelas verificadas/criadas")

    if settings.SCHEDULER_ENABLED:
        try:
            iniciar_scheduler(SessionLocal, settings.SCHEDULER_INTERVAL_MINUTES)
        except Exception as e:
            logger.error(f"[STARTUP] Falha ao iniciar scheduler SLA: {e}", exc_info=True)
    else:
        logger.info("[STARTUP] Scheduler SLA desativado (SLA_SCHEDULER_ENABLED)")


@app.on_event("shutdown")
def shutdown_event():
    parar_scheduler()
