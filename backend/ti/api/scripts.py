from __future__ import annotations
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.db import get_db
from ti.schemas.script import ScriptCreate, ScriptOut, ScriptUpdate
from ti.services import scripts as service
from ti.services.exceptions import ScriptNaoEncontradoError

logger = logging.getLogger("ti.api.scripts")

router = APIRouter(prefix="/scripts", tags=["TI - Scripts"])


def _erro_http(e: Exception, acao: str) -> HTTPException:
    if isinstance(e, ScriptNaoEncontradoError):
        return HTTPException(status_code=404, detail=str(e))
    logger.error(f"[SCRIPTS] Erro ao {acao}: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=f"Erro ao {acao}: {e}")


@router.get("", response_model=list[ScriptOut])
def listar_scripts(
    busca: Optional[str] = None,
    estruturante: Optional[str] = None,
    nivel: Optional[int] = Query(None, ge=1, le=3),
    db: Session = Depends(get_db),
):
    try:
        return service.listar_scripts(db, busca, estruturante, nivel)
    except Exception as e:
        raise _erro_http(e, "listar scripts")


@router.post("", response_model=ScriptOut, status_code=201)
def criar_script(payload: ScriptCreate, db: Session = Depends(get_db)):
    try:
        return service.criar_script(db, payload)
    except Exception as e:
        raise _erro_http(e, "criar script")


@router.get("/{script_id}", response_model=ScriptOut)
def obter_script(script_id: str, db: Session = Depends(get_db)):
    try:
        return service.obter_script(db, script_id)
    except Exception as e:
        raise _erro_http(e, "obter script")


@router.put("/{script_id}", response_model=ScriptOut)
def atualizar_script(script_id: str, payload: ScriptUpdate, db: Session = Depends(get_db)):
    try:
        return service.atualizar_script(db, script_id, payload)
    except Exception as e:
        raise _erro_http(e, "atualizar script")


@router.delete("/{script_id}")
def remover_script(script_id: str, db: Session = Depends(get_db)):
    try:
        service.remover_script(db, script_id)
        return {"message": "Script removido", "id": script_id}
    except Exception as e:
        raise _erro_http(e, "remover script")
