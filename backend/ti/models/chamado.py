from __future__ import annotations
import uuid
from datetime import datetime
from sqlalchemy import Integer, String, DateTime, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship
from core.db import Base
from core.utils import now_brazil_naive


def _novo_id() -> str:
    return str(uuid.uuid4())


class Chamado(Base):
    __tablename__ = "chamados"

    id: Mapped[str] = mapped_column(String(36), primary_key=True, default=_novo_id)
    numero_chamado: Mapped[str | None] = mapped_column(String(50), unique=True, nullable=True)
    titulo: Mapped[str] = mapped_column(String(300), nullable=False)
    descricao_usuario: Mapped[str] = mapped_column(Text, nullable=False)
    status: Mapped[str] = mapped_column(String(50), nullable=False, default="Aberto", index=True)
    nivel: Mapped[int] = mapped_column(Integer, nullable=False, default=1, index=True)
    estruturante: Mapped[str] = mapped_column(String(200), nullable=False, index=True)
    user_id: Mapped[str] = mapped_column(String(36), nullable=False, index=True)

    data_criacao: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=now_brazil_naive, index=True)
    # prazo só é recalculado quando o nível sobe
    data_prazo: Mapped[datetime | None] = mapped_column(DateTime, nullable=True, index=True)
    data_encaminhamento: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    nivel_encaminhamento: Mapped[int | None] = mapped_column(Integer, nullable=True)
    data_fechamento: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    anotacoes_internas: Mapped[str | None] = mapped_column(Text, nullable=True)

    updated_at: Mapped[datetime] = mapped_column(DateTime, default=now_brazil_naive, onupdate=now_brazil_naive)
    last_edited_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)
    last_edited_by: Mapped[str | None] = mapped_column(String(36), nullable=True)

    respostas: Mapped[list["Resposta"]] = relationship(
        "Resposta", back_populates="chamado", cascade="all, delete-orphan", order_by="Resposta.data_criacao"
    )
    links: Mapped[list["ChamadoLink"]] = relationship(
        "ChamadoLink", back_populates="chamado", cascade="all, delete-orphan", order_by="ChamadoLink.created_at"
    )
    notificacoes: Mapped[list["Notificacao"]] = relationship(
        "Notificacao", back_populates="chamado", cascade="all, delete-orphan"
    )

    @property
    def identificador(self) -> str:
        """Número do chamado ou os 8 primeiros caracteres do id"""
        return self.numero_chamado or self.id[:8]

    @property
    def prazo_expirado(self) -> bool:
        from modules.sla.calendario import is_prazo_expirado
        return is_prazo_expirado(self.data_prazo)
