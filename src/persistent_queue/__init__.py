# src/persistent_queue/__init__.py
"""
Persistent Queue: fila imutável com compartilhamento estrutural.

A fila é construída a partir de duas sequências persistentes (`leading` e
`trailing`), garantindo `head`, `tail` e `enqueue` em O(1) amortizado.
Versões antigas continuam válidas e compartilham com as novas a metade
não modificada.

Arquitetura em alto nível:
    - core.queue      → contrato público (Queue, QueueReader, queue, widen)
    - core.structures → lista encadeada persistente
    - core.config     → configuração ambiente (logging, renderização)
    - notebook_ui     → renderização de filas em notebooks

Exemplo:

    >>> q = queue([1, 2]).enqueue(3)
    >>> q.tail().head()
    2
"""

from .core.exceptions import EmptyQueueError, QueueException
from .core.queue import Queue, QueueReader, enqueue_general, queue, widen

__all__ = [
    "Queue",
    "QueueReader",
    "queue",
    "widen",
    "enqueue_general",
    "EmptyQueueError",
    "QueueException",
]

__version__ = "1.0.0"
