# src/persistent_queue/core/structures/__init__.py
"""
Estruturas persistentes de suporte do Persistent Queue.

Contém apenas a lista encadeada imutável (`PList`) usada como sequência
interna da fila. Nenhuma estrutura deste pacote é mutada após construída.
"""

from .plist import PList

__all__ = ["PList"]
