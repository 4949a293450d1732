"""Biblioteca de scripts de atendimento"""
from __future__ import annotations
import logging
from typing import Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from core.utils import now_brazil_naive
from ti.models import Script
from ti.schemas.script import ScriptCreate, ScriptUpdate
from .exceptions import ScriptNaoEncontradoError

logger = logging.getLogger("ti.services.scripts")


def obter_script(db: Session, script_id: str) -> Script:
    script = db.query(Script).filter(Script.id == script_id).first()
    if not script:
        raise ScriptNaoEncontradoError(script_id)
    return script


def listar_scripts(
    db: Session,
    busca: Optional[str] = None,
    estruturante: Optional[str] = None,
    nivel: Optional[int] = None,
) -> list[Script]:
    """Scripts filtrados, atualizados mais recentemente primeiro (busca por id ou título)"""
    query = db.query(Script)

    if busca and busca.strip():
        termo = f"%{busca.strip().lower()}%"
        query = query.filter(or_(
            func.lower(Script.id).like(termo),
            func.lower(Script.titulo_script).like(termo),
        ))
    if estruturante:
        query = query.filter(Script.estruturante == estruturante)
    if nivel is not None:
        query = query.filter(Script.nivel == nivel)

    return query.order_by(Script.ultima_atualizacao.desc()).all()


def criar_script(db: Session, payload: ScriptCreate) -> Script:
    agora = now_brazil_naive()
    script = Script(**payload.model_dump(), created_at=agora, ultima_atualizacao=agora)
    db.add(script)
    db.commit()
    db.refresh(script)
    logger.info(f"Script '{script.titulo_script}' criado por {payload.user_id}")
    return script


def atualizar_script(db: Session, script_id: str, payload: ScriptUpdate) -> Script:
    script = obter_script(db, script_id)
    dados = payload.model_dump(exclude_unset=True)
    # campos obrigatórios não aceitam null
    dados = {campo: valor for campo, valor in dados.items() if valor is not None or campo == "descricao_script"}

    for campo, valor in dados.items():
        setattr(script, campo, valor)
    script.ultima_atualizacao = now_brazil_naive()

    db.commit()
    db.refresh(script)
    return script


def remover_script(db: Session, script_id: str) -> None:
    script = obter_script(db, script_id)
    db.delete(script)
    db.commit()
    logger.info(f"Script {script_id} removido")
