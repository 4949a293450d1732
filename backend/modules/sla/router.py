"""Endpoints da API de SLA"""
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response
from sqlalchemy.orm import Session

from core.config import settings
from core.db import SessionLocal, get_db
from core.utils import now_brazil_naive
from .scheduler import SessionFactory, get_scheduler
from .verificador import VerificadorPrazos

logger = logging.getLogger("sla.router")

router = APIRouter(prefix="/sla", tags=["SLA"])

CAMINHO_VERIFICACAO = "/verificar-prazos"

# Endpoint de verificação é chamado por agendadores externos de qualquer origem
CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization, X-Client-Info, Apikey",
}


def get_session_factory() -> SessionFactory:
    return SessionLocal


@router.options(CAMINHO_VERIFICACAO, include_in_schema=False)
def verificar_prazos_preflight():
    return Response(status_code=200, headers=CORS_HEADERS)


@router.api_route(CAMINHO_VERIFICACAO, methods=["GET", "POST"])
def verificar_prazos(db: Session = Depends(get_db)):
    """
    Verifica chamados com prazo expirado e notifica os responsáveis.
    Sem parâmetros; retorna resumo em JSON.
    """
    try:
        resultado = VerificadorPrazos(db).verificar_chamados_expirados()
    except Exception as e:
        logger.error(f"Erro na verificação de prazos: {e}", exc_info=True)
        return JSONResponse(
            status_code=500,
            content={"success": False, "error": str(e)},
            headers=CORS_HEADERS,
        )

    if resultado.chamados_verificados == 0:
        return JSONResponse(
            content={
                "success": True,
                "message": "Nenhum chamado expirado encontrado",
                "count": 0,
            },
            headers=CORS_HEADERS,
        )

    return JSONResponse(
        content={
            "success": True,
            "message": f"Processados {resultado.chamados_verificados} chamados expirados",
            "notificacoesEnviadas": resultado.notificacoes_enviadas,
            "chamadosVerificados": resultado.chamados_verificados,
        },
        headers=CORS_HEADERS,
    )


@router.get("/scheduler/status")
def scheduler_status():
    return get_scheduler().get_status()


@router.post("/scheduler/executar")
def scheduler_executar(session_factory: SessionFactory = Depends(get_session_factory)):
    """Atualização manual (botão no frontend)"""
    try:
        resultado = get_scheduler().executar_manualmente(session_factory)
    except Exception as e:
        logger.error(f"Erro na verificação manual de prazos: {e}", exc_info=True)
        return JSONResponse(status_code=500, content={"success": False, "error": str(e)})
    return {"success": True, **resultado.to_dict()}


@router.get("/health")
def health():
    return {
        "status": "ok",
        "modulo": "sla",
        "regras": {
            "prazo_horas_uteis": settings.PRAZO_HORAS_UTEIS,
            "dias_uteis": "seg-sex",
            "status_finais": ["Fechado", "Encerrado"],
        },
        "timestamp": now_brazil_naive().isoformat(),
    }
