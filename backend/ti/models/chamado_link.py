from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.db import Base
from core.utils import now_brazil_naive


class ChamadoLink(Base):
    """Links relacionados a um chamado (nome + URL)"""
    __tablename__ = "chamado_links"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    chamado_id: Mapped[str] = mapped_column(String(36), ForeignKey("chamados.id"), nullable=False, index=True)
    nome: Mapped[str] = mapped_column(String(200), nullable=False)
    url: Mapped[str] = mapped_column(Text, nullable=False)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive)

    chamado: Mapped["Chamado"] = relationship("Chamado", back_populates="links")
