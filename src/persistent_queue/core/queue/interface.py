# src/persistent_queue/core/queue/interface.py
"""
Contratos públicos da fila persistente.

Este módulo define as duas visões tipadas sobre uma mesma fila:

    - `QueueReader[T_co]`: visão produtora (somente leitura), covariante.
      Expõe apenas `head`, `tail`, `is_empty`, `len()` e iteração.
      Uma `QueueReader[Cat]` pode ser usada onde se espera
      `QueueReader[Animal]`.

    - `Queue[T]`: visão completa, invariante. Acrescenta as posições
      consumidoras (`enqueue`, `enqueue_all`) e `dequeue`. Como `enqueue`
      recebe `T`, tratar uma `Queue[Cat]` como `Queue[Animal]` permitiria
      enfileirar um `Dog`; por isso ela não é covariante.

A variância é verificada apenas por type checkers estáticos (mypy, pyright).
Em tempo de execução, a fronteira é garantida por `widen()` e
`enqueue_general()` (ver `api.py`).

Limites explícitos:
    - Não contém implementação (ver `_impl.py`)
    - Não expõe a representação em duas sequências
"""

from __future__ import annotations

from typing import Iterable, Iterator, Protocol, Tuple, TypeVar, runtime_checkable

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class QueueReader(Protocol[T_co]):
    """Visão somente leitura (produtora) de uma fila persistente."""

    def head(self) -> T_co:
        """Primeiro elemento. Levanta `EmptyQueueError` se a fila estiver vazia."""
        ...

    def tail(self) -> "QueueReader[T_co]":
        """Nova fila sem o primeiro elemento. Levanta `EmptyQueueError` se vazia."""
        ...

    def is_empty(self) -> bool:
        ...

    def __len__(self) -> int:
        ...

    def __iter__(self) -> Iterator[T_co]:
        ...


@runtime_checkable
class Queue(QueueReader[T], Protocol[T]):
    """Visão completa (produtora e consumidora) de uma fila persistente."""

    def tail(self) -> "Queue[T]":
        ...

    def enqueue(self, item: T) -> "Queue[T]":
        """Nova fila com `item` no final. O(1); o receptor não muda."""
        ...

    def enqueue_all(self, items: Iterable[T]) -> "Queue[T]":
        ...

    def dequeue(self) -> Tuple[T, "Queue[T]"]:
        """`(head(), tail())` em um único passo."""
        ...
