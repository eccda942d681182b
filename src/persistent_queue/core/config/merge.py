# src/persistent_queue/core/config/merge.py
"""
Utilitário canônico de deep-merge de configuração.

Política de merge (v1):
    - dict → merge recursivo por chave
    - list → sobrescrita total (sem merge elemento a elemento)
    - escalar → sobrescrita direta
    - conflito de tipos → erro estrutural explícito

Conflitos são reportados pelo caminho pontuado da chave (ex.:
`notebook_ui.max_rows`), o mesmo usado por `InvalidSettingError`.

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigTypeConflictError


def _dotted(prefix: str, key: Any) -> str:
    return f"{prefix}.{key}" if prefix else str(key)


def _merge_into(result: Dict[str, Any], override: Dict[str, Any], prefix: str) -> None:
    for key, value in override.items():
        path = _dotted(prefix, key)
        current = result.get(key)

        if key not in result or isinstance(value, list):
            result[key] = deepcopy(value)
        elif isinstance(current, dict) and isinstance(value, dict):
            _merge_into(current, value, path)
        elif type(current) is not type(value):
            raise ConfigTypeConflictError(
                f"Conflito de tipo em '{path}': "
                f"{type(current).__name__} (defaults) vs {type(value).__name__} (override)"
            )
        else:
            result[key] = deepcopy(value)


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Realiza um deep-merge determinístico entre dois dicionários de configuração.

    Args:
        base (Dict[str, Any]): Configuração base (ex.: defaults).
        override (Dict[str, Any]): Overrides explícitos.

    Returns:
        Dict[str, Any]: Nova configuração resultante do deep-merge.

    Raises:
        ConfigTypeConflictError: Se ocorrer conflito de tipo entre base e override.
    """

    if not isinstance(base, dict) or not isinstance(override, dict):
        raise ConfigTypeConflictError(
            f"Deep-merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    # a cópia profunda isola o resultado; _merge_into só altera essa cópia
    result: Dict[str, Any] = deepcopy(base)
    _merge_into(result, override, "")
    return result
