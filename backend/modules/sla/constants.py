"""Constantes e funções auxiliares para normalização de status"""

from typing import Set

STATUS_INICIAL = "Aberto"

# Status FINALIZADOS (prazo deixa de ser verificado), já normalizados
STATUS_FINALIZADOS: Set[str] = {
    "fechado",
    "encerrado",
}

# Níveis de severidade (1 = baixo, 3 = alto)
NIVEL_MINIMO = 1
NIVEL_MAXIMO = 3


def normalizar_status(status: str) -> str:
    """
    Normaliza o status para comparação consistente.

    Exemplos:
        "Fechado" -> "fechado"
        "  ENCERRADO " -> "encerrado"
    """
    if not status:
        return ""
    return status.strip().lower()


def is_status_finalizado(status: str) -> bool:
    """Verifica se o status é finalizado (comparação sem diferenciar maiúsculas)"""
    return normalizar_status(status) in STATUS_FINALIZADOS
