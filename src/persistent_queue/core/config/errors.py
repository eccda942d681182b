# src/persistent_queue/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Persistent Queue.

As exceções aqui definidas representam falhas estruturais ao carregar,
mesclar ou interpretar configuração. Nenhuma delas é levantada pelas
operações da fila.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro de fila (ver `EmptyQueueError`)
"""

from typing import Any, Dict

from ..errors import QueueErrorPayload, config_invalid_setting


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração.

    Permite captura genérica de falhas de configuração, separadas das
    falhas de uso da fila.
    """


class DefaultsNotFoundError(ConfigError):
    """
    O arquivo de configuração base (defaults) não existe.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - Não há criação automática de defaults
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Extensão de arquivo não suportada pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """O conteúdo raiz do arquivo não é um dicionário (`dict`)."""


class ConfigTypeConflictError(ConfigError):
    """
    Conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"logging": {"level": "INFO"}}
        - override: {"logging": "DEBUG"}

    Nenhum merge parcial é produzido em caso de conflito.
    """


class InvalidSettingError(ConfigError):
    """
    Valor de configuração com tipo ou domínio inválido.

    Carrega os dados estruturados do payload canônico
    `CONFIG_INVALID_SETTING` para diagnóstico.
    """

    def __init__(self, *, key: str, value: Any, expected: str) -> None:
        payload = config_invalid_setting(key=key, value=value, expected=expected)
        super().__init__(f"{payload.message}: {key}={value!r} (esperado: {expected})")
        self.payload: QueueErrorPayload = payload

    @property
    def details(self) -> Dict[str, Any]:
        return self.payload.details
