from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import Integer, String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from core.db import Base
from core.utils import now_brazil_naive


class Script(Base):
    """Roteiros de atendimento por estruturante e nível"""
    __tablename__ = "scripts"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    titulo_script: Mapped[str] = mapped_column(String(300), nullable=False)
    descricao_script: Mapped[str | None] = mapped_column(Text, nullable=True)
    conteudo_script: Mapped[str] = mapped_column(Text, nullable=False)
    estruturante: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    nivel: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive)
    ultima_atualizacao: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, default=now_brazil_naive, onupdate=now_brazil_naive, index=True
    )
