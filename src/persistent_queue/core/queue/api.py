# src/persistent_queue/core/queue/api.py
"""
Fronteira pública da fila persistente.

Funções:
    - `queue(items)`: fábrica; única forma de obter uma `Queue[T]`
    - `widen(q)`: visão somente leitura (`QueueReader`) sobre o mesmo valor
    - `enqueue_general(q, x)`: enqueue com tipo de elemento mais geral

Decisões arquiteturais:
    - A classe concreta fica em `_impl` e não é exportada
    - A visão alargada não possui atributo `enqueue`; seu `tail()` também
      é uma visão somente leitura
    - `enqueue_general` recusa visões somente leitura com `TypeError`

Invariantes:
    - Nenhuma função deste módulo copia as sequências internas
    - `widen` nunca altera a fila de origem
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, TypeVar, Union, cast

from ._impl import _PersistentQueue, _from_items
from .interface import Queue, QueueReader

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


def queue(items: Iterable[T] = ()) -> Queue[T]:
    """
    Constrói uma fila persistente com os elementos de `items`, em ordem.

    O primeiro elemento de `items` é o `head()` da fila resultante.
    """
    return _from_items(items)


@dataclass(frozen=True, eq=False)
class _ReadOnlyQueue(Generic[T_co]):
    """Visão produtora sobre uma fila; não expõe posições consumidoras."""

    _source: QueueReader[T_co]

    def head(self) -> T_co:
        return self._source.head()

    def tail(self) -> "_ReadOnlyQueue[T_co]":
        return _ReadOnlyQueue(self._source.tail())

    def is_empty(self) -> bool:
        return self._source.is_empty()

    def __len__(self) -> int:
        return len(self._source)

    def __iter__(self) -> Iterator[T_co]:
        return iter(self._source)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _ReadOnlyQueue):
            return NotImplemented
        return self._source == other._source

    def __hash__(self) -> int:
        return hash(("readonly", self._source))

    def __repr__(self) -> str:
        return f"widen({self._source!r})"


def widen(q: QueueReader[T_co]) -> QueueReader[T_co]:
    """
    Retorna uma visão somente leitura de `q`.

    Uso típico: passar uma `Queue[Cat]` para código que espera
    `QueueReader[Animal]`. Aplicar `widen` a uma visão já alargada
    retorna a própria visão.
    """
    if isinstance(q, _ReadOnlyQueue):
        return q
    return _ReadOnlyQueue(q)


def enqueue_general(q: Queue[T], item: U) -> Queue[Union[T, U]]:
    """
    Enfileira `item` cujo tipo pode ser mais geral que o da fila.

    O resultado é tipado pelo supertipo comum `T | U`; a fila original
    continua tipada como `Queue[T]` e não é alterada.

    Raises:
        TypeError: Se `q` for uma visão somente leitura criada por `widen`.
    """
    if isinstance(q, _ReadOnlyQueue) or not hasattr(q, "enqueue"):
        raise TypeError(
            "enqueue não é permitido em uma visão somente leitura (QueueReader)"
        )
    general = cast("Queue[Union[T, U]]", q)
    return general.enqueue(item)


def is_queue(obj: object) -> bool:
    """True se `obj` for uma fila completa criada por `queue()`."""
    return isinstance(obj, _PersistentQueue)
