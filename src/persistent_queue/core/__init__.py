# src/persistent_queue/core/__init__.py
"""
Core do Persistent Queue.

Componentes principais:
    - structures → lista encadeada persistente (PList)
    - queue      → contrato público da fila, fábrica e visões de variância
    - errors     → payloads canônicos de erro
    - exceptions → exceções tipadas (EmptyQueueError)
    - config     → loader, deep-merge, hashing e QueueSettings
    - log        → configuração do logger do pacote

Princípios fundamentais:
    - Toda operação da fila retorna um novo valor; nada é mutado
    - Erros são explícitos e propagados ao chamador imediato
    - O core não depende de notebooks ou UI
"""
