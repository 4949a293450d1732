"""Configurações da aplicação (variáveis de ambiente / .env)"""
import os
from dataclasses import dataclass, field
from typing import List

from dotenv import load_dotenv

load_dotenv()


def _env_bool(nome: str, padrao: bool) -> bool:
    valor = os.getenv(nome)
    if valor is None:
        return padrao
    return valor.strip().lower() in {"1", "true", "yes", "sim", "on"}


@dataclass
class Settings:
    """Configurações gerais do sistema de chamados"""

    # Calendário
    TIMEZONE: str = os.getenv("SLA_TIMEZONE", "America/Sao_Paulo")
    PRAZO_HORAS_UTEIS: int = int(os.getenv("SLA_PRAZO_HORAS_UTEIS", "72"))

    # Scheduler da verificação de prazos
    SCHEDULER_ENABLED: bool = _env_bool("SLA_SCHEDULER_ENABLED", True)
    SCHEDULER_INTERVAL_MINUTES: int = int(os.getenv("SLA_SCHEDULER_INTERVAL_MINUTES", "5"))

    # CORS
    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "").strip()
    ALLOWED_ORIGINS: List[str] = field(default_factory=lambda: [
        "http://localhost:5173",  # Vite
        "http://127.0.0.1:5173",
        "http://localhost:8080",
        "http://127.0.0.1:8080",
    ])

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    def __post_init__(self):
        if self.FRONTEND_URL and self.FRONTEND_URL not in self.ALLOWED_ORIGINS:
            self.ALLOWED_ORIGINS.append(self.FRONTEND_URL)


# Instância global
settings = Settings()
