"""
Schemas Pydantic para validação de dados de chamados
"""
from __future__ import annotations
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator


def texto_obrigatorio(v: str) -> str:
    v = v.strip()
    if not v:
        raise ValueError("campo obrigatório")
    return v


def validar_url_http(v: str) -> str:
    v = v.strip()
    if not v.startswith(("http://", "https://")):
        raise ValueError("url deve começar com http:// ou https://")
    return v


# ==================== Chamado ====================
class ChamadoCreate(BaseModel):
    titulo: str = Field(..., min_length=1, max_length=300)
    nivel: int = Field(..., ge=1, le=3)
    estruturante: str = Field(..., min_length=1, max_length=200)
    descricao_usuario: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1, max_length=36)
    numero_chamado: Optional[str] = Field(None, max_length=50)

    @field_validator("titulo", "estruturante", "descricao_usuario")
    @classmethod
    def validar_texto(cls, v: str) -> str:
        return texto_obrigatorio(v)


class ChamadoUpdate(BaseModel):
    """Atualização parcial; user_id identifica quem edita"""
    user_id: str = Field(..., min_length=1, max_length=36)
    titulo: Optional[str] = Field(None, min_length=1, max_length=300)
    descricao_usuario: Optional[str] = None
    status: Optional[str] = Field(None, min_length=1, max_length=50)
    nivel: Optional[int] = Field(None, ge=1, le=3)
    estruturante: Optional[str] = Field(None, min_length=1, max_length=200)
    numero_chamado: Optional[str] = Field(None, max_length=50)

    @field_validator("status")
    @classmethod
    def validar_status(cls, v: Optional[str]) -> Optional[str]:
        return texto_obrigatorio(v) if v is not None else v


class AnotacoesUpdate(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=36)
    anotacoes_internas: Optional[str] = None


class ChamadoOut(BaseModel):
    id: str
    numero_chamado: Optional[str] = None
    titulo: str
    descricao_usuario: str
    status: str
    nivel: int
    estruturante: str
    user_id: str
    data_criacao: datetime
    data_prazo: Optional[datetime] = None
    data_encaminhamento: Optional[datetime] = None
    nivel_encaminhamento: Optional[int] = None
    data_fechamento: Optional[datetime] = None
    anotacoes_internas: Optional[str] = None
    updated_at: Optional[datetime] = None
    last_edited_at: Optional[datetime] = None
    last_edited_by: Optional[str] = None
    prazo_expirado: bool = False

    class Config:
        from_attributes = True


# ==================== Respostas ====================
class RespostaCreate(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=36)
    conteudo: str = Field(..., min_length=1)
    tipo: str = Field(default="atendente", max_length=30)

    @field_validator("conteudo")
    @classmethod
    def validar_conteudo(cls, v: str) -> str:
        return texto_obrigatorio(v)


class RespostaOut(BaseModel):
    id: str
    chamado_id: str
    user_id: str
    conteudo: str
    tipo: str
    data_criacao: datetime

    class Config:
        from_attributes = True


# ==================== Links ====================
class LinkCreate(BaseModel):
    user_id: str = Field(..., min_length=1, max_length=36)
    nome: str = Field(..., min_length=1, max_length=200)
    url: str = Field(..., min_length=1)

    @field_validator("nome")
    @classmethod
    def validar_nome(cls, v: str) -> str:
        return texto_obrigatorio(v)

    @field_validator("url")
    @classmethod
    def validar_url(cls, v: str) -> str:
        return validar_url_http(v)


class LinkOut(BaseModel):
    id: str
    chamado_id: str
    nome: str
    url: str
    user_id: str
    created_at: datetime

    class Config:
        from_attributes = True


# ==================== Histórico ====================
class ChamadoLogOut(BaseModel):
    id: str
    chamado_id: str
    user_id: str
    acao: str
    campo_alterado: Optional[str] = None
    valor_antigo: Optional[str] = None
    valor_novo: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
