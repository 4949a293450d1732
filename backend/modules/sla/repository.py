"""Repositório para acesso a dados da verificação de prazos"""

from datetime import datetime
from typing import List

from sqlalchemy import func
from sqlalchemy.orm import Session

from ti.models import Chamado, Notificacao
from .constants import STATUS_FINALIZADOS


class SlaRepository:
    """Repositório para operações de prazo/notificação"""

    def __init__(self, db: Session):
        self.db = db

    # ========== Chamados ==========

    def _filtro_expirados(self, query, agora: datetime):
        return query.filter(
            Chamado.data_prazo.isnot(None),
            Chamado.data_prazo < agora,
            func.lower(func.trim(Chamado.status)).notin_(sorted(STATUS_FINALIZADOS)),
        )

    def listar_chamados_expirados(self, agora: datetime) -> List[Chamado]:
        """Chamados com prazo vencido e status não finalizado"""
        query = self._filtro_expirados(self.db.query(Chamado), agora)
        return query.order_by(Chamado.data_prazo).all()

    def contar_chamados_expirados(self, agora: datetime) -> int:
        return self._filtro_expirados(self.db.query(func.count(Chamado.id)), agora).scalar() or 0

    # ========== Notificações ==========

    def existe_notificacao_nao_lida(self, chamado_id: str, user_id: str) -> bool:
        """Verifica se já há notificação não visualizada para o par chamado/usuário"""
        existente = self.db.query(Notificacao.id).filter(
            Notificacao.chamado_id == chamado_id,
            Notificacao.user_id == user_id,
            Notificacao.visualizada.is_(False),
        ).first()
        return existente is not None

    def criar_notificacao(self, user_id: str, chamado_id: str, mensagem: str) -> Notificacao:
        """Cria uma notificação não visualizada"""
        notificacao = Notificacao(
            user_id=user_id,
            chamado_id=chamado_id,
            mensagem=mensagem,
            visualizada=False,
        )
        self.db.add(notificacao)
        self.db.commit()
        self.db.refresh(notificacao)
        return notificacao
