from __future__ import annotations
import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from core.db import get_db
from ti.schemas.chamado import (
    AnotacoesUpdate,
    ChamadoCreate,
    ChamadoLogOut,
    ChamadoOut,
    ChamadoUpdate,
    LinkCreate,
    LinkOut,
    RespostaCreate,
    RespostaOut,
)
from ti.services import chamados as service
from ti.services.auditoria import listar_logs
from ti.services.exceptions import (
    ChamadoNaoEncontradoError,
    LinkNaoEncontradoError,
    NumeroChamadoDuplicadoError,
)

logger = logging.getLogger("ti.api.chamados")

router = APIRouter(prefix="/chamados", tags=["TI - Chamados"])


def _erro_http(e: Exception, acao: str) -> HTTPException:
    if isinstance(e, (ChamadoNaoEncontradoError, LinkNaoEncontradoError)):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, NumeroChamadoDuplicadoError):
        return HTTPException(status_code=409, detail=str(e))
    logger.error(f"[CHAMADOS] Erro ao {acao}: {e}", exc_info=True)
    return HTTPException(status_code=500, detail=f"Erro ao {acao}: {e}")


@router.get("", response_model=list[ChamadoOut])
def listar_chamados(
    busca: Optional[str] = None,
    status: Optional[str] = None,
    nivel: Optional[int] = Query(None, ge=1, le=3),
    estruturante: Optional[str] = None,
    data_inicio: Optional[date] = None,
    data_fim: Optional[date] = None,
    db: Session = Depends(get_db),
):
    """
    Lista chamados, mais recentes primeiro.

    Query params:
    - busca: trecho do id, número ou título
    - data_inicio/data_fim: YYYY-MM-DD (dias inteiros, baseado em data_criacao)
    """
    try:
        return service.listar_chamados(db, busca, status, nivel, estruturante, data_inicio, data_fim)
    except Exception as e:
        raise _erro_http(e, "listar chamados")


@router.post("", response_model=ChamadoOut, status_code=201)
def criar_chamado(payload: ChamadoCreate, db: Session = Depends(get_db)):
    try:
        return service.criar_chamado(db, payload)
    except Exception as e:
        raise _erro_http(e, "criar chamado")


@router.get("/{chamado_id}", response_model=ChamadoOut)
def obter_chamado(chamado_id: str, db: Session = Depends(get_db)):
    try:
        return service.obter_chamado(db, chamado_id)
    except Exception as e:
        raise _erro_http(e, "obter chamado")


@router.patch("/{chamado_id}", response_model=ChamadoOut)
def atualizar_chamado(chamado_id: str, payload: ChamadoUpdate, db: Session = Depends(get_db)):
    try:
        return service.atualizar_chamado(db, chamado_id, payload)
    except Exception as e:
        raise _erro_http(e, "atualizar chamado")


@router.put("/{chamado_id}/anotacoes", response_model=ChamadoOut)
def atualizar_anotacoes(chamado_id: str, payload: AnotacoesUpdate, db: Session = Depends(get_db)):
    try:
        return service.atualizar_anotacoes(db, chamado_id, payload)
    except Exception as e:
        raise _erro_http(e, "atualizar anotações")


@router.delete("/{chamado_id}")
def deletar_chamado(chamado_id: str, user_id: str = Query(..., min_length=1), db: Session = Depends(get_db)):
    try:
        service.deletar_chamado(db, chamado_id, user_id)
        return {"message": "Chamado excluído com sucesso", "id": chamado_id}
    except Exception as e:
        raise _erro_http(e, "excluir chamado")


# ==================== Respostas ====================

@router.get("/{chamado_id}/respostas", response_model=list[RespostaOut])
def listar_respostas(chamado_id: str, db: Session = Depends(get_db)):
    try:
        return service.listar_respostas(db, chamado_id)
    except Exception as e:
        raise _erro_http(e, "listar respostas")


@router.post("/{chamado_id}/respostas", response_model=RespostaOut, status_code=201)
def adicionar_resposta(chamado_id: str, payload: RespostaCreate, db: Session = Depends(get_db)):
    try:
        return service.adicionar_resposta(db, chamado_id, payload)
    except Exception as e:
        raise _erro_http(e, "enviar resposta")


# ==================== Links ====================

@router.get("/{chamado_id}/links", response_model=list[LinkOut])
def listar_links(chamado_id: str, db: Session = Depends(get_db)):
    try:
        return service.listar_links(db, chamado_id)
    except Exception as e:
        raise _erro_http(e, "listar links")


@router.post("/{chamado_id}/links", response_model=LinkOut, status_code=201)
def adicionar_link(chamado_id: str, payload: LinkCreate, db: Session = Depends(get_db)):
    try:
        return service.adicionar_link(db, chamado_id, payload)
    except Exception as e:
        raise _erro_http(e, "adicionar link")


@router.delete("/{chamado_id}/links/{link_id}")
def remover_link(
    chamado_id: str,
    link_id: str,
    user_id: str = Query(..., min_length=1),
    db: Session = Depends(get_db),
):
    try:
        service.remover_link(db, chamado_id, link_id, user_id)
        return {"message": "Link removido", "id": link_id}
    except Exception as e:
        raise _erro_http(e, "remover link")


# ==================== Histórico ====================

@router.get("/{chamado_id}/historico", response_model=list[ChamadoLogOut])
def obter_historico(chamado_id: str, db: Session = Depends(get_db)):
    """Histórico de edição, mais recente primeiro (inclui chamados já excluídos)"""
    try:
        return listar_logs(db, chamado_id)
    except Exception as e:
        raise _erro_http(e, "obter histórico")
