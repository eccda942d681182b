# src/persistent_queue/core/queue/_impl.py
"""
Implementação interna da fila persistente (não exportada).

Representação:
    - `leading`: PList com os primeiros elementos, em ordem lógica
    - `trailing`: PList com os últimos elementos, em ordem inversa de enqueue

Ordem lógica: `leading ++ reverse(trailing)`.

Mirror: quando `leading` está vazio e `trailing` não, `head`/`tail`/`dequeue`
operam sobre uma nova instância com `leading = reverse(trailing)` e
`trailing` vazio. O receptor nunca é alterado; o custo da reversão é
amortizado pelas chamadas de `tail` seguintes.

Invariantes:
    - Nenhuma instância é mutada após a construção (frozen dataclass)
    - `enqueue` nunca toca `leading`: a nova instância referencia o mesmo objeto
    - `tail` sem mirror preserva o objeto `trailing`
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Tuple, TypeVar

from ..exceptions import EmptyQueueError
from ..structures.plist import PList

logger = logging.getLogger(__name__)

T = TypeVar("T")

_REPR_LIMIT = 20


@dataclass(frozen=True, eq=False, repr=False)
class _PersistentQueue(Generic[T]):
    leading: PList[T]
    trailing: PList[T]

    # -----------------------------
    # Leitura
    # -----------------------------
    def is_empty(self) -> bool:
        return not self.leading and not self.trailing

    def head(self) -> T:
        """
        Primeiro elemento da ordem lógica.

        Com mirror pendente (`leading` vazio), cada chamada reverte `trailing`
        em O(n) e registra um evento DEBUG, pois o receptor não guarda o
        resultado. Para consultar e consumir, prefira `dequeue()`; para
        consultar várias vezes, use o `head()` da fila retornada por `tail()`
        ou `dequeue()` em vez de repetir a chamada na mesma instância.
        """
        if self.is_empty():
            raise EmptyQueueError.for_operation("head")
        return _mirror(self).leading.first

    def tail(self) -> "_PersistentQueue[T]":
        if self.is_empty():
            raise EmptyQueueError.for_operation("tail")
        mirrored = _mirror(self)
        return _PersistentQueue(mirrored.leading.rest, mirrored.trailing)

    def dequeue(self) -> Tuple[T, "_PersistentQueue[T]"]:
        if self.is_empty():
            raise EmptyQueueError.for_operation("dequeue")
        mirrored = _mirror(self)
        rest = _PersistentQueue(mirrored.leading.rest, mirrored.trailing)
        return mirrored.leading.first, rest

    # -----------------------------
    # Escrita (sempre retorna nova instância)
    # -----------------------------
    def enqueue(self, item: T) -> "_PersistentQueue[T]":
        return _PersistentQueue(self.leading, self.trailing.prepend(item))

    def enqueue_all(self, items: Iterable[T]) -> "_PersistentQueue[T]":
        trailing = self.trailing
        for item in items:
            trailing = trailing.prepend(item)
        if trailing is self.trailing:
            return self
        return _PersistentQueue(self.leading, trailing)

    # -----------------------------
    # Protocolos Python
    # -----------------------------
    def __len__(self) -> int:
        return len(self.leading) + len(self.trailing)

    def __bool__(self) -> bool:
        return not self.is_empty()

    def __iter__(self) -> Iterator[T]:
        yield from self.leading
        yield from reversed(list(self.trailing))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _PersistentQueue):
            return NotImplemented
        if self is other:
            return True
        if len(self) != len(other):
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(("queue", tuple(self)))

    def __repr__(self) -> str:
        items = []
        for i, item in enumerate(self):
            if i == _REPR_LIMIT:
                items.append("...")
                break
            items.append(repr(item))
        return f"queue([{', '.join(items)}])"


def _mirror(q: _PersistentQueue[T]) -> _PersistentQueue[T]:
    """Move `reverse(trailing)` para `leading` quando `leading` está vazio."""
    if q.leading or not q.trailing:
        return q
    logger.debug("mirror: %d elemento(s) movidos de trailing para leading", len(q.trailing))
    return _PersistentQueue(q.trailing.reversed(), PList.empty())


def _from_items(items: Iterable[T]) -> _PersistentQueue[T]:
    return _PersistentQueue(PList.of(items), PList.empty())
