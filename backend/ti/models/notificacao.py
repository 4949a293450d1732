from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import Boolean, String, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.db import Base
from core.utils import now_brazil_naive


class Notificacao(Base):
    """Notificações exibidas ao usuário (ex: prazo expirado)"""
    __tablename__ = "notificacoes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    chamado_id: Mapped[str] = mapped_column(String(36), ForeignKey("chamados.id"), nullable=False, index=True)
    mensagem: Mapped[str] = mapped_column(Text, nullable=False)
    visualizada: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive)

    chamado: Mapped["Chamado"] = relationship("Chamado", back_populates="notificacoes")
