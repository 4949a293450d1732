from __future__ import annotations
import enum
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column
from core.db import Base
from core.utils import now_brazil_naive


class AcaoLog(str, enum.Enum):
    """Ações registradas no histórico de edição"""
    UPDATE = "update"
    STATUS_CHANGE = "status_change"
    ESCALATION = "escalation"
    MOVED_TO_PLANNER = "moved_to_planner"
    RESPONSE_ADDED = "response_added"
    NOTES_UPDATED = "notes_updated"
    LINK_ADDED = "link_added"
    LINK_REMOVED = "link_removed"
    CREATED = "created"
    DELETED = "deleted"


class ChamadoLog(Base):
    """Histórico de edição (somente inserção)"""
    __tablename__ = "chamado_logs"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    # sem ForeignKey: o log sobrevive à exclusão do chamado
    chamado_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False)
    acao: Mapped[str] = mapped_column(String(30), nullable=False)
    campo_alterado: Mapped[str | None] = mapped_column(String(100), nullable=True)
    valor_antigo: Mapped[str | None] = mapped_column(Text, nullable=True)
    valor_novo: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive, index=True)
