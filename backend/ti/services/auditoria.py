"""Histórico de edição dos chamados (chamado_logs)"""
from __future__ import annotations
import logging
from typing import Any, Iterable

from sqlalchemy.orm import Session

from ti.models import AcaoLog, ChamadoLog

logger = logging.getLogger("ti.services.auditoria")

# Campos de controle que nunca geram log
_CAMPOS_IGNORADOS = {"last_edited_at", "last_edited_by", "updated_at"}


def _como_texto(valor: Any) -> str | None:
    return None if valor is None else str(valor)


def registrar_log(
    db: Session,
    chamado_id: str,
    user_id: str,
    acao: AcaoLog,
    campo_alterado: str | None = None,
    valor_antigo: Any = None,
    valor_novo: Any = None,
) -> ChamadoLog:
    """Adiciona uma entrada ao histórico na sessão atual (commit fica com o chamador)"""
    log = ChamadoLog(
        chamado_id=chamado_id,
        user_id=user_id,
        acao=acao.value,
        campo_alterado=campo_alterado,
        valor_antigo=_como_texto(valor_antigo),
        valor_novo=_como_texto(valor_novo),
    )
    db.add(log)
    return log


def classificar_alteracao(campo: str, valor_antigo: Any, valor_novo: Any) -> AcaoLog:
    """status -> status_change; nível maior -> escalation; demais -> update"""
    if campo == "status":
        return AcaoLog.STATUS_CHANGE
    if campo == "nivel" and valor_antigo is not None and int(valor_novo) > int(valor_antigo):
        return AcaoLog.ESCALATION
    return AcaoLog.UPDATE


def registrar_alteracoes(
    db: Session,
    chamado_id: str,
    user_id: str,
    alteracoes: dict[str, Any],
    valores_anteriores: dict[str, Any],
) -> list[ChamadoLog]:
    """Um log por campo efetivamente alterado"""
    logs = []
    for campo, valor_novo in alteracoes.items():
        if campo in _CAMPOS_IGNORADOS:
            continue
        valor_antigo = valores_anteriores.get(campo)
        if valor_antigo == valor_novo:
            continue
        acao = classificar_alteracao(campo, valor_antigo, valor_novo)
        logs.append(registrar_log(db, chamado_id, user_id, acao, campo, valor_antigo, valor_novo))
    return logs


def listar_logs(db: Session, chamado_id: str) -> Iterable[ChamadoLog]:
    return db.query(ChamadoLog).filter(
        ChamadoLog.chamado_id == chamado_id
    ).order_by(ChamadoLog.created_at.desc()).all()
