from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class EstruturanteCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    user_id: Optional[str] = Field(None, max_length=36)

    @field_validator("nome")
    @classmethod
    def validar_nome(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("nome obrigatório")
        return v


class EstruturanteOut(BaseModel):
    id: str
    nome: str
    created_at: datetime

    class Config:
        from_attributes = True


class StatusOpcaoCreate(EstruturanteCreate):
    nome: str = Field(..., min_length=1, max_length=50)
    cor: Optional[str] = Field(None, max_length=20)


class StatusOpcaoOut(BaseModel):
    id: str
    nome: str
    cor: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class EstatisticasChamados(BaseModel):
    total: int
    expirados: int
    por_status: dict[str, int]
    por_estruturante: dict[str, int]
    por_nivel: dict[int, int]
