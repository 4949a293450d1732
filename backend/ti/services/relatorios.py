"""Estatísticas para a tela de relatórios"""
from __future__ import annotations
from typing import Dict

from sqlalchemy import func
from sqlalchemy.orm import Session

from core.utils import now_brazil_naive
from modules.sla.constants import NIVEL_MAXIMO, NIVEL_MINIMO
from modules.sla.repository import SlaRepository
from ti.models import Chamado


def _contagem_por(db: Session, coluna) -> Dict:
    linhas = db.query(coluna, func.count(Chamado.id)).group_by(coluna).all()
    return {valor: total for valor, total in linhas}


def obter_estatisticas(db: Session) -> dict:
    """Totais por status, estruturante e nível (níveis 1-3 sempre presentes)"""
    por_nivel = {nivel: 0 for nivel in range(NIVEL_MINIMO, NIVEL_MAXIMO + 1)}
    por_nivel.update(_contagem_por(db, Chamado.nivel))

    return {
        "total": db.query(func.count(Chamado.id)).scalar() or 0,
        "expirados": SlaRepository(db).contar_chamados_expirados(now_brazil_naive()),
        "por_status": _contagem_por(db, Chamado.status),
        "por_estruturante": _contagem_por(db, Chamado.estruturante),
        "por_nivel": por_nivel,
    }
