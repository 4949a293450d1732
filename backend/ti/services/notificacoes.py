"""Consulta e leitura de notificações do usuário"""
from __future__ import annotations

from sqlalchemy.orm import Session

from ti.models import Notificacao
from .exceptions import NotificacaoNaoEncontradaError


def listar_nao_lidas(db: Session, user_id: str) -> list[Notificacao]:
    return db.query(Notificacao).filter(
        Notificacao.user_id == user_id,
        Notificacao.visualizada.is_(False),
    ).order_by(Notificacao.created_at.desc()).all()


def contar_nao_lidas(db: Session, user_id: str) -> int:
    return db.query(Notificacao).filter(
        Notificacao.user_id == user_id,
        Notificacao.visualizada.is_(False),
    ).count()


def marcar_como_visualizada(db: Session, notificacao_id: str) -> Notificacao:
    n = db.query(Notificacao).filter(Notificacao.id == notificacao_id).first()
    if not n:
        raise NotificacaoNaoEncontradaError(notificacao_id)
    if not n.visualizada:
        n.visualizada = True
        db.commit()
        db.refresh(n)
    return n


def marcar_todas_como_visualizadas(db: Session, user_id: str) -> int:
    total = db.query(Notificacao).filter(
        Notificacao.user_id == user_id,
        Notificacao.visualizada.is_(False),
    ).update({Notificacao.visualizada: True}, synchronize_session=False)
    db.commit()
    return total
