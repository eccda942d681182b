# src/persistent_queue/core/queue/__init__.py
"""
Fila persistente (imutável, com compartilhamento estrutural).

Exporta apenas o contrato público: as interfaces `Queue` / `QueueReader`,
a fábrica `queue()` e as funções de fronteira de variância `widen()` e
`enqueue_general()`. A representação em duas sequências e a operação de
mirror permanecem internas (`_impl`).
"""

from .api import enqueue_general, queue, widen
from .interface import Queue, QueueReader

__all__ = ["Queue", "QueueReader", "queue", "widen", "enqueue_general"]
