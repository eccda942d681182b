# src/persistent_queue/core/config/__init__.py
"""
Camada de configuração do Persistent Queue.

A fila em si não lê configuração: ela é um valor puro. Este pacote resolve
apenas o ambiente ao redor dela (nível de log, limites de renderização).

A configuração é:
    - declarativa (YAML ou JSON)
    - determinística (defaults + override local via deep-merge)
    - identificável (hash canônico SHA-256)

Invariantes:
    - A configuração bruta é sempre um dicionário puro (dict)
    - `QueueSettings` é imutável e validado na construção
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não altera o comportamento das operações da fila
    - Não mantém estado global
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import load_config
from .merge import deep_merge
from .settings import QueueSettings, load_settings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidSettingError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "load_config",
    "deep_merge",
    "QueueSettings",
    "load_settings",
]
