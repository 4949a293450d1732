from .chamados import router as chamados_router
from .notificacoes import router as notificacoes_router
from .configuracoes import router as configuracoes_router
from .relatorios import router as relatorios_router
from .scripts import router as scripts_router
from .links_uteis import router as links_uteis_router

__all__ = [
    "chamados_router",
    "notificacoes_router",
    "configuracoes_router",
    "relatorios_router",
    "scripts_router",
    "links_uteis_router",
]
