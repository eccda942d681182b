# tests/conftest.py
"""
Fixtures compartilhados para testes do Persistent Queue.

Este módulo define fixtures reutilizáveis que fornecem:
- conteúdos YAML de configuração (defaults e override local) como string
- filas em layouts internos conhecidos (sem mirror pendente, com mirror
  pendente e misto)

Decisões arquiteturais:
    - Configurações são fornecidas como string; cada teste decide se grava
      em `tmp_path`
    - Filas são construídas apenas pela API pública (`queue`, `enqueue`,
      `tail`), nunca instanciando a classe interna

Invariantes:
    - Nenhuma fixture realiza I/O
    - Filas retornadas são imutáveis e podem ser compartilhadas entre testes
"""

import pytest

from persistent_queue import queue


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao `config.defaults.yaml` de um projeto.

    Usado por testes de loader, merge, hashing e QueueSettings.
    """

    return """\
logging:
  level: WARNING
notebook_ui:
  max_rows: 50
  theme: light
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """YAML de override local: apenas as chaves que mudam."""

    return """\
logging:
  level: DEBUG
notebook_ui:
  max_rows: 5
"""


# =====================================================
# Queue fixtures
# =====================================================

@pytest.fixture
def leading_only_queue():
    """`leading = [1, 2, 3]`, `trailing = []`."""
    return queue([1, 2, 3])


@pytest.fixture
def trailing_only_queue():
    """
    `leading = []`, `trailing = [3, 2, 1]` (ordem armazenada).

    Ordem lógica `[1, 2, 3]`; o próximo `head`/`tail` precisa de mirror.
    """
    return queue().enqueue(1).enqueue(2).enqueue(3)


@pytest.fixture
def mixed_queue():
    """`leading = [2]`, `trailing = [4, 3]`; ordem lógica `[2, 3, 4]`."""
    return queue([1, 2]).enqueue(3).enqueue(4).tail()
