from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.db import get_db
from ti.schemas.configuracao import EstatisticasChamados
from ti.services.relatorios import obter_estatisticas

logger = logging.getLogger("ti.api.relatorios")

router = APIRouter(prefix="/relatorios", tags=["TI - Relatórios"])


@router.get("/estatisticas", response_model=EstatisticasChamados)
def estatisticas(db: Session = Depends(get_db)):
    try:
        return obter_estatisticas(db)
    except Exception as e:
        logger.error(f"Erro ao calcular estatísticas: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"Erro ao calcular estatísticas: {e}")
