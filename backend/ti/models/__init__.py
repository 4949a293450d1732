from .chamado import Chamado
from .resposta import Resposta
from .chamado_link import ChamadoLink
from .notificacao import Notificacao
from .chamado_log import ChamadoLog, AcaoLog
from .configuracao import Estruturante, StatusOpcao
from .script import Script
from .link_util import LinkUtil

__all__ = [
    "Chamado",
    "Resposta",
    "ChamadoLink",
    "Notificacao",
    "ChamadoLog",
    "AcaoLog",
    "Estruturante",
    "StatusOpcao",
    "Script",
    "LinkUtil",
]
