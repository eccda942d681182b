# src/persistent_queue/core/structures/plist.py
"""
PList: lista encadeada persistente (imutável) do Persistent Queue.

Este módulo define a sequência canônica usada internamente pela fila
persistente para armazenar tanto o lado `leading` quanto o lado `trailing`.

Uma PList é:
    - a lista vazia (singleton retornado por `PList.empty()`), ou
    - uma célula `(first, rest, size)` onde `rest` é outra PList

Princípios fundamentais:
    - Nenhuma célula é mutada após a construção
    - `prepend` é O(1) e reaproveita o receptor como cauda (structural sharing)
    - Iteração, igualdade e reversão são iterativas (sem recursão)

Invariantes:
    - `size` é sempre igual ao número de elementos alcançáveis
    - A lista vazia é única por processo
    - Uma mesma PList pode ser referenciada por várias filas simultaneamente

Limites explícitos:
    - Não oferece acesso aleatório eficiente
    - Não conhece a semântica de fila (mirror, enqueue)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T_co = TypeVar("T_co", covariant=True)

_REPR_LIMIT = 20


@dataclass(frozen=True, eq=False, repr=False)
class PList(Generic[T_co]):
    """
    Célula imutável de uma lista encadeada persistente.

    Não deve ser construída diretamente: use `PList.empty()`, `PList.of()`
    ou `prepend()`.
    """

    _first: Any
    _rest: Optional["PList[T_co]"]
    _size: int

    # -----------------------------
    # Construção
    # -----------------------------
    @staticmethod
    def empty() -> "PList[Any]":
        """Retorna a lista vazia canônica."""
        return _EMPTY

    @staticmethod
    def of(items: Iterable[T_co] = ()) -> "PList[T_co]":
        """
        Constrói uma PList preservando a ordem de `items`.

        O iterável é materializado uma única vez e as células são criadas
        do fim para o início, de modo que o custo é O(n).
        """
        result: PList[Any] = _EMPTY
        for item in reversed(list(items)):
            result = result.prepend(item)
        return result

    def prepend(self, item: Any) -> "PList[Any]":
        """Retorna uma nova lista com `item` na frente; o receptor vira `rest`."""
        return PList(item, self, self._size + 1)

    # -----------------------------
    # Acesso
    # -----------------------------
    def is_empty(self) -> bool:
        return self._size == 0

    @property
    def first(self) -> T_co:
        if self._size == 0:
            raise IndexError("first de PList vazia")
        return self._first

    @property
    def rest(self) -> "PList[T_co]":
        if self._size == 0 or self._rest is None:
            raise IndexError("rest de PList vazia")
        return self._rest

    def reversed(self) -> "PList[T_co]":
        """Retorna uma nova lista com os elementos em ordem inversa (O(n))."""
        result: PList[Any] = _EMPTY
        for item in self:
            result = result.prepend(item)
        return result

    # -----------------------------
    # Protocolos Python
    # -----------------------------
    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[T_co]:
        node: PList[T_co] = self
        while node._size:
            yield node._first
            node = node._rest  # type: ignore[assignment]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PList):
            return NotImplemented
        if self is other:
            return True
        if self._size != other._size:
            return False
        return all(a == b for a, b in zip(self, other))

    def __hash__(self) -> int:
        return hash(("PList", tuple(self)))

    def __repr__(self) -> str:
        items = []
        for i, item in enumerate(self):
            if i == _REPR_LIMIT:
                items.append("...")
                break
            items.append(repr(item))
        return f"PList([{', '.join(items)}])"


_EMPTY: PList[Any] = PList(None, None, 0)
