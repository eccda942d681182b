"""
Persistent Queue: Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Persistent Queue.
Erros são considerados artefatos de domínio e fazem parte do contrato
público da biblioteca, devendo ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma recuperação implícita é permitida: o erro é sempre entregue
ao chamador imediato.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class QueueErrorPayload:
    """
    Payload canônico de erro do Persistent Queue.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao chamador
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        # o chamador deve garantir que details seja serializável
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Fila
QUEUE_EMPTY = "QUEUE_EMPTY"

# Configuração
CONFIG_INVALID_SETTING = "CONFIG_INVALID_SETTING"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def queue_empty(
    *,
    operation: str,
    hint: str = "Verifique `is_empty()` ou `len(q)` antes de consumir a fila.",
) -> QueueErrorPayload:
    return QueueErrorPayload(
        type=QUEUE_EMPTY,
        message="Operação de leitura em fila vazia",
        details={"operation": operation},
        hint=hint,
    )


def config_invalid_setting(
    *,
    key: str,
    value: Any,
    expected: str,
    hint: str = "Corrija o valor no arquivo de defaults ou no override local.",
) -> QueueErrorPayload:
    return QueueErrorPayload(
        type=CONFIG_INVALID_SETTING,
        message="Valor de configuração inválido",
        details={
            "key": key,
            "value": value,
            "expected": expected,
        },
        hint=hint,
    )
