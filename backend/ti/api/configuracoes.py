from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from core.db import get_db
from ti.models import Estruturante, StatusOpcao
from ti.schemas.configuracao import EstruturanteCreate, EstruturanteOut, StatusOpcaoCreate, StatusOpcaoOut
from ti.services import configuracoes as service
from ti.services.exceptions import ConfiguracaoDuplicadaError, ConfiguracaoNaoEncontradaError

router = APIRouter(prefix="/configuracoes", tags=["TI - Configurações"])


def _criar(db: Session, modelo, payload):
    try:
        return service.criar(db, modelo, payload)
    except ConfiguracaoDuplicadaError as e:
        raise HTTPException(status_code=409, detail=str(e))


def _atualizar(db: Session, modelo, item_id: str, payload):
    try:
        return service.atualizar(db, modelo, item_id, payload)
    except ConfiguracaoNaoEncontradaError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ConfiguracaoDuplicadaError as e:
        raise HTTPException(status_code=409, detail=str(e))


def _remover(db: Session, modelo, item_id: str) -> dict:
    try:
        service.remover(db, modelo, item_id)
    except ConfiguracaoNaoEncontradaError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"message": "Item removido", "id": item_id}


@router.get("/estruturantes", response_model=list[EstruturanteOut])
def listar_estruturantes(db: Session = Depends(get_db)):
    return service.listar(db, Estruturante)


@router.post("/estruturantes", response_model=EstruturanteOut, status_code=201)
def criar_estruturante(payload: EstruturanteCreate, db: Session = Depends(get_db)):
    return _criar(db, Estruturante, payload)


@router.put("/estruturantes/{item_id}", response_model=EstruturanteOut)
def atualizar_estruturante(item_id: str, payload: EstruturanteCreate, db: Session = Depends(get_db)):
    return _atualizar(db, Estruturante, item_id, payload)


@router.delete("/estruturantes/{item_id}")
def remover_estruturante(item_id: str, db: Session = Depends(get_db)):
    return _remover(db, Estruturante, item_id)


@router.get("/status", response_model=list[StatusOpcaoOut])
def listar_status(db: Session = Depends(get_db)):
    return service.listar(db, StatusOpcao)


@router.post("/status", response_model=StatusOpcaoOut, status_code=201)
def criar_status(payload: StatusOpcaoCreate, db: Session = Depends(get_db)):
    return _criar(db, StatusOpcao, payload)


@router.put("/status/{item_id}", response_model=StatusOpcaoOut)
def atualizar_status(item_id: str, payload: StatusOpcaoCreate, db: Session = Depends(get_db)):
    return _atualizar(db, StatusOpcao, item_id, payload)


@router.delete("/status/{item_id}")
def remover_status(item_id: str, db: Session = Depends(get_db)):
    return _remover(db, StatusOpcao, item_id)
