"""Listas configuráveis: estruturantes e opções de status"""
from __future__ import annotations
from typing import Optional, Type, TypeVar, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from ti.models import Estruturante, StatusOpcao
from ti.schemas.configuracao import EstruturanteCreate, StatusOpcaoCreate
from .exceptions import ConfiguracaoDuplicadaError, ConfiguracaoNaoEncontradaError

ItemConfiguracao = TypeVar("ItemConfiguracao", Estruturante, StatusOpcao)


def listar(db: Session, modelo: Type[ItemConfiguracao]) -> list[ItemConfiguracao]:
    return db.query(modelo).order_by(modelo.nome).all()


def _garantir_nome_livre(db: Session, modelo: Type[ItemConfiguracao], nome: str, item_id: Optional[str] = None) -> None:
    """Nomes são únicos sem diferenciar maiúsculas"""
    query = db.query(modelo.id).filter(func.lower(modelo.nome) == nome.lower())
    if item_id:
        query = query.filter(modelo.id != item_id)
    if query.first():
        raise ConfiguracaoDuplicadaError(nome)


def criar(
    db: Session,
    modelo: Type[ItemConfiguracao],
    payload: Union[EstruturanteCreate, StatusOpcaoCreate],
) -> ItemConfiguracao:
    _garantir_nome_livre(db, modelo, payload.nome)

    item = modelo(**payload.model_dump())
    db.add(item)
    db.commit()
    db.refresh(item)
    return item


def atualizar(
    db: Session,
    modelo: Type[ItemConfiguracao],
    item_id: str,
    payload: Union[EstruturanteCreate, StatusOpcaoCreate],
) -> ItemConfiguracao:
    item = db.query(modelo).filter(modelo.id == item_id).first()
    if not item:
        raise ConfiguracaoNaoEncontradaError(item_id)
    _garantir_nome_livre(db, modelo, payload.nome, item_id)

    for campo, valor in payload.model_dump(exclude={"user_id"}, exclude_unset=True).items():
        setattr(item, campo, valor)
    db.commit()
    db.refresh(item)
    return item


def remover(db: Session, modelo: Type[ItemConfiguracao], item_id: str) -> None:
    item = db.query(modelo).filter(modelo.id == item_id).first()
    if not item:
        raise ConfiguracaoNaoEncontradaError(item_id)
    db.delete(item)
    db.commit()
