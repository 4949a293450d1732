from __future__ import annotations
import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.db import get_db
from ti.schemas.notificacao import ContagemNotificacoes, NotificacaoOut
from ti.services import notificacoes as service
from ti.services.exceptions import NotificacaoNaoEncontradaError

logger = logging.getLogger("ti.api.notificacoes")

router = APIRouter(prefix="/notificacoes", tags=["TI - Notificações"])


@router.get("", response_model=list[NotificacaoOut])
def listar_notificacoes(user_id: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    """Notificações não visualizadas do usuário, mais recentes primeiro"""
    return service.listar_nao_lidas(db, user_id)


@router.get("/contagem", response_model=ContagemNotificacoes)
def contar_notificacoes(user_id: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    return {"nao_lidas": service.contar_nao_lidas(db, user_id)}


@router.patch("/{notificacao_id}/visualizar", response_model=NotificacaoOut)
def visualizar_notificacao(notificacao_id: str, db: Session = Depends(get_db)):
    try:
        return service.marcar_como_visualizada(db, notificacao_id)
    except NotificacaoNaoEncontradaError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/visualizar-todas")
def visualizar_todas(user_id: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    total = service.marcar_todas_como_visualizadas(db, user_id)
    logger.info(f"{total} notificações marcadas como lidas para {user_id}")
    return {"atualizadas": total}
