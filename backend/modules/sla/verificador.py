"""
Verificação de chamados com prazo expirado
- Seleciona chamados com prazo vencido e status diferente de Fechado/Encerrado
- Cria uma notificação ao dono do chamado se ainda não houver uma não visualizada
- Idempotente: rodar de novo sem mudanças não cria notificações
- Cada chamado é processado isoladamente; erro em um não interrompe os demais
"""
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from core.config import settings
from core.utils import now_brazil_naive
from ti.models import Chamado
from .repository import SlaRepository

logger = logging.getLogger("sla.verificador")


@dataclass
class ResultadoVerificacao:
    chamados_verificados: int = 0
    notificacoes_enviadas: int = 0
    falhas: int = 0

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


def montar_mensagem_expiracao(chamado: Chamado) -> str:
    return (
        f'PRAZO EXPIRADO: O chamado "{chamado.titulo}" ({chamado.identificador}) '
        f"ultrapassou o prazo de {settings.PRAZO_HORAS_UTEIS}h úteis. "
        "Por favor, atualize o status."
    )


class VerificadorPrazos:
    """Reconciliação entre chamados vencidos e notificações pendentes"""

    def __init__(self, db: Session, repository: Optional[SlaRepository] = None):
        self.db = db
        self.repository = repository or SlaRepository(db)

    def verificar_chamados_expirados(self, agora: Optional[datetime] = None) -> ResultadoVerificacao:
        """
        Executa uma varredura completa.

        Falha na consulta inicial é propagada; falhas por chamado são
        registradas em log e contadas em `falhas`.

        A checagem de existência e a inserção não ficam na mesma transação:
        duas varreduras simultâneas podem notificar o mesmo chamado duas vezes.
        """
        agora = agora or now_brazil_naive()
        logger.info(f"[{agora.isoformat()}] Iniciando verificação de chamados expirados...")

        chamados = self.repository.listar_chamados_expirados(agora)
        resultado = ResultadoVerificacao(chamados_verificados=len(chamados))
        logger.info(f"Encontrados {len(chamados)} chamados expirados")

        for chamado in chamados:
            chamado_id = chamado.id
            try:
                if self.repository.existe_notificacao_nao_lida(chamado_id, chamado.user_id):
                    logger.debug(f"Notificação já existe para chamado {chamado_id}")
                    continue

                self.repository.criar_notificacao(
                    user_id=chamado.user_id,
                    chamado_id=chamado_id,
                    mensagem=montar_mensagem_expiracao(chamado),
                )
                resultado.notificacoes_enviadas += 1
                logger.info(f"Notificação criada para chamado {chamado_id}")
            except SQLAlchemyError as e:
                self.db.rollback()
                resultado.falhas += 1
                logger.error(f"Erro ao criar notificação para chamado {chamado_id}: {e}", exc_info=True)

        logger.info(
            f"Total de notificações enviadas: {resultado.notificacoes_enviadas} "
            f"({resultado.falhas} falhas)"
        )
        return resultado
