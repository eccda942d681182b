# src/persistent_queue/core/config/settings.py
"""
QueueSettings: visão tipada da configuração efetiva.

Chaves reconhecidas (v1):

    logging:
      level: WARNING        # nível do logger `persistent_queue`
    notebook_ui:
      max_rows: 50          # linhas exibidas por `render_queue`

Chaves desconhecidas são preservadas no dicionário de origem e ignoradas
aqui. Valores inválidos levantam `InvalidSettingError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidSettingError
from .hashing import compute_config_hash
from .loader import load_config

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_RENDER_MAX_ROWS = 50

_LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")


def _section(config: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidSettingError(key=name, value=section, expected="mapping")
    return section


@dataclass(frozen=True)
class QueueSettings:
    """
    Configuração ambiente imutável do Persistent Queue.

    Campos:
    - log_level: nome do nível de log (ex.: "DEBUG")
    - render_max_rows: limite de linhas nos renderers de notebook
    - config_hash: hash canônico da configuração de origem (ou None)
    """

    log_level: str = DEFAULT_LOG_LEVEL
    render_max_rows: int = DEFAULT_RENDER_MAX_ROWS
    config_hash: Optional[str] = None

    def __post_init__(self) -> None:
        if not isinstance(self.log_level, str) or self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingError(
                key="logging.level",
                value=self.log_level,
                expected="um de " + ", ".join(_LOG_LEVELS),
            )
        # bool é subclasse de int e não é um limite válido
        if (
            isinstance(self.render_max_rows, bool)
            or not isinstance(self.render_max_rows, int)
            or self.render_max_rows < 1
        ):
            raise InvalidSettingError(
                key="notebook_ui.max_rows",
                value=self.render_max_rows,
                expected="inteiro >= 1",
            )
        object.__setattr__(self, "log_level", self.log_level.upper())

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "QueueSettings":
        """Constrói as settings a partir de uma configuração já resolvida."""
        if not isinstance(config, dict):
            raise InvalidSettingError(key="<root>", value=config, expected="mapping")

        log_section = _section(config, "logging")
        ui_section = _section(config, "notebook_ui")

        return cls(
            log_level=log_section.get("level", DEFAULT_LOG_LEVEL),
            render_max_rows=ui_section.get("max_rows", DEFAULT_RENDER_MAX_ROWS),
            config_hash=compute_config_hash(config),
        )


def load_settings(
    *,
    defaults_path: str,
    local_path: Optional[str] = None,
) -> QueueSettings:
    """Atalho: `load_config` seguido de `QueueSettings.from_config`."""
    return QueueSettings.from_config(
        load_config(defaults_path=defaults_path, local_path=local_path)
    )
