# tests/core/config/test_settings.py
"""
Testes de QueueSettings (visão tipada da configuração efetiva).
"""

import dataclasses
import logging
from pathlib import Path

import pytest

from persistent_queue.core.config import (
    InvalidSettingError,
    QueueSettings,
    compute_config_hash,
    load_settings,
)


def test_defaults():
    settings = QueueSettings()
    assert settings.log_level == "WARNING"
    assert settings.render_max_rows == 50
    assert settings.config_hash is None
    assert settings.log_level_value == logging.WARNING


def test_from_config_reads_known_keys_and_hash():
    cfg = {"logging": {"level": "debug"}, "notebook_ui": {"max_rows": 7}, "other": 1}
    settings = QueueSettings.from_config(cfg)

    assert settings.log_level == "DEBUG"
    assert settings.render_max_rows == 7
    assert settings.config_hash == compute_config_hash(cfg)


def test_from_config_missing_sections_use_defaults():
    settings = QueueSettings.from_config({})
    assert settings.log_level == "WARNING"
    assert settings.render_max_rows == 50


@pytest.mark.parametrize(
    "cfg, key",
    [
        ({"logging": {"level": "LOUD"}}, "logging.level"),
        ({"logging": {"level": 10}}, "logging.level"),
        ({"notebook_ui": {"max_rows": 0}}, "notebook_ui.max_rows"),
        ({"notebook_ui": {"max_rows": True}}, "notebook_ui.max_rows"),
        ({"notebook_ui": {"max_rows": "5"}}, "notebook_ui.max_rows"),
        ({"logging": "DEBUG"}, "logging"),
    ],
)
def test_invalid_values_raise(cfg, key):
    with pytest.raises(InvalidSettingError) as excinfo:
        QueueSettings.from_config(cfg)
    assert excinfo.value.details["key"] == key
    assert excinfo.value.payload.type == "CONFIG_INVALID_SETTING"


def test_settings_are_frozen():
    settings = QueueSettings()
    with pytest.raises(dataclasses.FrozenInstanceError):
        settings.render_max_rows = 1  # type: ignore[misc]


def test_load_settings_from_files(
    tmp_path: Path, project_like_config_defaults_yaml, project_like_config_local_yaml
):
    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    settings = load_settings(defaults_path=str(defaults), local_path=str(local))

    assert settings.log_level == "DEBUG"
    assert settings.render_max_rows == 5
    assert settings.config_hash is not None
