# src/persistent_queue/core/log.py
"""
Logging do Persistent Queue.

Todos os módulos registram via `logging.getLogger(__name__)`, portanto sob a
hierarquia `persistent_queue`. Este módulo apenas aplica o nível definido em
`QueueSettings` ao logger raiz do pacote.

Limites explícitos:
    - Não instala handlers (decisão da aplicação hospedeira)
    - Não altera o logger raiz do Python
"""

from __future__ import annotations

import logging
from typing import Optional

from .config.settings import QueueSettings

PACKAGE_LOGGER_NAME = "persistent_queue"


def get_package_logger() -> logging.Logger:
    return logging.getLogger(PACKAGE_LOGGER_NAME)


def configure_logging(settings: Optional[QueueSettings] = None) -> logging.Logger:
    """
    Aplica `settings.log_level` ao logger `persistent_queue` e o retorna.

    Sem settings, usa os defaults de `QueueSettings`.
    """
    settings = settings or QueueSettings()
    logger = get_package_logger()
    logger.setLevel(settings.log_level_value)
    logger.debug(
        "logging configurado: level=%s config_hash=%s",
        settings.log_level,
        settings.config_hash,
    )
    return logger
