from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.db import Base
from core.utils import now_brazil_naive


class Resposta(Base):
    """Respostas registradas no chamado pelo atendente"""
    __tablename__ = "respostas"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    chamado_id: Mapped[str] = mapped_column(String(36), ForeignKey("chamados.id"), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    conteudo: Mapped[str] = mapped_column(Text, nullable=False)
    tipo: Mapped[str] = mapped_column(String(30), nullable=False, default="atendente")
    data_criacao: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive)

    chamado: Mapped["Chamado"] = relationship("Chamado", back_populates="respostas")
