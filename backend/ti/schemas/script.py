from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from .chamado import texto_obrigatorio


class ScriptCreate(BaseModel):
    titulo_script: str = Field(..., min_length=1, max_length=300)
    descricao_script: Optional[str] = None
    conteudo_script: str = Field(..., min_length=1)
    estruturante: str = Field(..., min_length=1, max_length=200)
    nivel: int = Field(..., ge=1, le=3)
    user_id: str = Field(..., min_length=1, max_length=36)

    @field_validator("titulo_script", "conteudo_script", "estruturante")
    @classmethod
    def validar_texto(cls, v: str) -> str:
        return texto_obrigatorio(v)


class ScriptUpdate(BaseModel):
    """Atualização parcial do script"""
    titulo_script: Optional[str] = Field(None, min_length=1, max_length=300)
    descricao_script: Optional[str] = None
    conteudo_script: Optional[str] = Field(None, min_length=1)
    estruturante: Optional[str] = Field(None, min_length=1, max_length=200)
    nivel: Optional[int] = Field(None, ge=1, le=3)

    @field_validator("titulo_script", "conteudo_script", "estruturante")
    @classmethod
    def validar_texto(cls, v: Optional[str]) -> Optional[str]:
        return texto_obrigatorio(v) if v is not None else v


class ScriptOut(BaseModel):
    id: str
    titulo_script: str
    descricao_script: Optional[str] = None
    conteudo_script: str
    estruturante: str
    nivel: int
    user_id: str
    created_at: datetime
    ultima_atualizacao: datetime

    class Config:
        from_attributes = True
