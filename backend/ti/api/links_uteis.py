from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.db import get_db
from ti.schemas.link_util import LinkUtilCreate, LinkUtilOut, LinkUtilUpdate
from ti.services import links_uteis as service
from ti.services.exceptions import LinkUtilNaoEncontradoError

router = APIRouter(prefix="/links-uteis", tags=["TI - Links úteis"])


@router.get("", response_model=list[LinkUtilOut])
def listar_links(db: Session = Depends(get_db)):
    """Links mais recentes primeiro"""
    return service.listar_links(db)


@router.post("", response_model=LinkUtilOut, status_code=201)
def criar_link(payload: LinkUtilCreate, db: Session = Depends(get_db)):
    return service.criar_link(db, payload)


@router.put("/{link_id}", response_model=LinkUtilOut)
def atualizar_link(link_id: str, payload: LinkUtilUpdate, db: Session = Depends(get_db)):
    try:
        return service.atualizar_link(db, link_id, payload)
    except LinkUtilNaoEncontradoError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/{link_id}")
def remover_link(link_id: str, db: Session = Depends(get_db)):
    try:
        service.remover_link(db, link_id)
    except LinkUtilNaoEncontradoError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Link removido", "id": link_id}
