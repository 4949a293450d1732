from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .chamado import texto_obrigatorio, validar_url_http


class LinkUtilCreate(BaseModel):
    nome: str = Field(..., min_length=1, max_length=200)
    url: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1, max_length=36)

    @field_validator("nome")
    @classmethod
    def validar_nome(cls, v: str) -> str:
        return texto_obrigatorio(v)

    @field_validator("url")
    @classmethod
    def validar_url(cls, v: str) -> str:
        return validar_url_http(v)


class LinkUtilUpdate(BaseModel):
    nome: Optional[str] = Field(None, min_length=1, max_length=200)
    url: Optional[str] = Field(None, min_length=1)

    @field_validator("nome")
    @classmethod
    def validar_nome(cls, v: Optional[str]) -> Optional[str]:
        return texto_obrigatorio(v) if v is not None else v

    @field_validator("url")
    @classmethod
    def validar_url(cls, v: Optional[str]) -> Optional[str]:
        return validar_url_http(v) if v is not None else v


class LinkUtilOut(BaseModel):
    id: str
    nome: str
    url: str
    user_id: str
    created_at: datetime

    class Config:
        from_attributes = True
