# tests/test_smoke.py
"""
Testes de sanidade estrutural (smoke tests) do Persistent Queue.

Garantem apenas que o pacote é importável e que a superfície pública
mínima existe. Não validam comportamento da fila.
"""

import persistent_queue


def test_smoke():
    """O pacote importa e expõe a fábrica e o erro canônico."""
    assert callable(persistent_queue.queue)
    assert issubclass(persistent_queue.EmptyQueueError, Exception)
