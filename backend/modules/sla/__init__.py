"""
Módulo SLA
- Prazo: 72 horas úteis (seg-sex) a partir da abertura ou do encaminhamento
- Verificação periódica de prazos expirados gera notificação ao dono do chamado
- Status finais (Fechado, Encerrado) não são verificados
"""
from .calendario import (
    add_business_days,
    add_business_hours,
    calcular_prazo,
    is_prazo_expirado,
)

__all__ = ["add_business_days", "add_business_hours", "calcular_prazo", "is_prazo_expirado"]
__version__ = "1.0.0"
