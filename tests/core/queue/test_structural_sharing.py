# tests/core/queue/test_structural_sharing.py
"""
Testes de compartilhamento estrutural (identidade de referência).

As sequências internas são inspecionadas diretamente apenas para verificar
que novas versões reaproveitam as partes não modificadas em vez de copiá-las.
"""

import pytest

from persistent_queue import queue

LAYOUTS = ["leading_only_queue", "trailing_only_queue", "mixed_queue"]


@pytest.mark.parametrize("layout", LAYOUTS)
def test_enqueue_shares_leading(layout, request):
    q1 = request.getfixturevalue(layout)
    q2 = q1.enqueue(42)
    assert q2.leading is q1.leading


def test_enqueue_on_empty_shares_leading():
    q1 = queue()
    q2 = q1.enqueue(1)
    assert q2.leading is q1.leading


def test_enqueue_shares_previous_trailing_as_rest(mixed_queue):
    q2 = mixed_queue.enqueue(5)
    assert q2.trailing.rest is mixed_queue.trailing


def test_tail_without_mirror_shares_trailing(mixed_queue):
    q2 = mixed_queue.tail()
    assert q2.trailing is mixed_queue.trailing
    assert q2.leading is mixed_queue.leading.rest


def test_branching_versions_share_prefix(leading_only_queue):
    left = leading_only_queue.enqueue("left")
    right = leading_only_queue.enqueue("right")
    assert left.leading is right.leading
    assert left.trailing.rest is right.trailing.rest
    assert list(left) == [1, 2, 3, "left"]
    assert list(right) == [1, 2, 3, "right"]
