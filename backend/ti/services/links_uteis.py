"""Links úteis compartilhados"""
from __future__ import annotations

from sqlalchemy.orm import Session

from ti.models import LinkUtil
from ti.schemas.link_util import LinkUtilCreate, LinkUtilUpdate
from .exceptions import LinkUtilNaoEncontradoError


def obter_link(db: Session, link_id: str) -> LinkUtil:
    link = db.query(LinkUtil).filter(LinkUtil.id == link_id).first()
    if not link:
        raise LinkUtilNaoEncontradoError(link_id)
    return link


def listar_links(db: Session) -> list[LinkUtil]:
    return db.query(LinkUtil).order_by(LinkUtil.created_at.desc()).all()


def criar_link(db: Session, payload: LinkUtilCreate) -> LinkUtil:
    link = LinkUtil(**payload.model_dump())
    db.add(link)
    db.commit()
    db.refresh(link)
    return link


def atualizar_link(db: Session, link_id: str, payload: LinkUtilUpdate) -> LinkUtil:
    link = obter_link(db, link_id)
    for campo, valor in payload.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(link, campo, valor)
    db.commit()
    db.refresh(link)
    return link


def remover_link(db: Session, link_id: str) -> None:
    link = obter_link(db, link_id)
    db.delete(link)
    db.commit()
