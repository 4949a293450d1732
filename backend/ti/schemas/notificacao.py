from __future__ import annotations
from datetime import datetime

from pydantic import BaseModel


class NotificacaoOut(BaseModel):
    id: str
    user_id: str
    chamado_id: str
    mensagem: str
    visualizada: bool
    created_at: datetime

    class Config:
        from_attributes = True


class ContagemNotificacoes(BaseModel):
    nao_lidas: int
