# src/persistent_queue/core/config/hashing.py
"""
Hashing canônico de configuração do Persistent Queue.

O hash representa a identidade estrutural da configuração efetiva e é
exposto em `QueueSettings.config_hash`, permitindo comparar ambientes
(ex.: notebook de aula vs. CI) sem comparar arquivos.

Política (v1): JSON canônico (chaves ordenadas, separadores compactos,
UTF-8) seguido de SHA-256.
"""

import hashlib
import json
from typing import Any, Dict


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico da configuração.

    Returns:
        str: Hash hexadecimal de 64 caracteres.

    Raises:
        TypeError: Se `config` não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
