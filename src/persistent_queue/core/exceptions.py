"""
Persistent Queue: Canonical Exceptions (v1)

Este módulo define as exceções tipadas do Persistent Queue.

Objetivo:
- Permitir que operações da fila levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para QueueErrorPayload
- Evitar IndexError/ValueError genéricos na API pública

Regras:
- `EmptyQueueError` é o único erro das operações de fila.
- Exceções carregam apenas dados estruturados (serializáveis).
- Nenhuma exceção é suprimida ou re-tentada internamente.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional

from .errors import QUEUE_EMPTY, QueueErrorPayload, queue_empty


@dataclass(eq=False)
class QueueException(Exception):
    """Base class para exceções do Persistent Queue.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    code: ClassVar[str] = "QUEUE_ERROR"

    def __str__(self) -> str:
        return self.message

    def to_payload(self) -> QueueErrorPayload:
        return QueueErrorPayload(
            type=self.code,
            message=self.message,
            details=dict(self.details),
            hint=self.hint,
        )


@dataclass(eq=False)
class EmptyQueueError(QueueException):
    """`head`, `tail` ou `dequeue` chamados sobre uma fila vazia."""

    code: ClassVar[str] = QUEUE_EMPTY

    @classmethod
    def for_operation(cls, operation: str) -> "EmptyQueueError":
        payload = queue_empty(operation=operation)
        return cls(
            message=payload.message,
            details=payload.details,
            hint=payload.hint,
        )
