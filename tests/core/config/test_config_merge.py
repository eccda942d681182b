# tests/core/config/test_config_merge.py
"""
Testes da política de deep-merge (dict recursivo, list/escalar sobrescritos,
conflito de tipo como erro) e da não mutação dos inputs.
"""

import copy

import pytest

from persistent_queue.core.config import deep_merge
from persistent_queue.core.config.errors import ConfigTypeConflictError


def test_merge_simple_override():
    base = {"a": 1, "b": 2}
    override = {"b": 3}
    base_before = copy.deepcopy(base)

    assert deep_merge(base, override) == {"a": 1, "b": 3}
    assert base == base_before


def test_merge_nested_dict():
    base = {"logging": {"level": "INFO", "fmt": "short"}}
    override = {"logging": {"level": "DEBUG"}}

    assert deep_merge(base, override) == {"logging": {"level": "DEBUG", "fmt": "short"}}


def test_merge_list_override_total():
    base = {"items": [1, 2, 3]}
    override = {"items": [9]}

    merged = deep_merge(base, override)

    assert merged == {"items": [9]}
    merged["items"].append(10)
    assert override["items"] == [9]


def test_merge_new_key_is_added():
    assert deep_merge({"a": 1}, {"b": {"c": 2}}) == {"a": 1, "b": {"c": 2}}


def test_merge_type_conflict_raises():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"logging": {"level": "INFO"}}, {"logging": "DEBUG"})


def test_merge_requires_dicts():
    with pytest.raises(ConfigTypeConflictError):
        deep_merge({"a": 1}, ["not", "a", "dict"])  # type: ignore[arg-type]


def test_merge_conflict_reports_dotted_key():
    base = {"notebook_ui": {"max_rows": 50}}
    override = {"notebook_ui": {"max_rows": "cinquenta"}}

    with pytest.raises(ConfigTypeConflictError, match=r"notebook_ui\.max_rows"):
        deep_merge(base, override)


def test_merge_nested_result_does_not_alias_inputs():
    base = {"logging": {"level": "INFO"}}
    override = {"logging": {"fmt": {"style": "short"}}}

    merged = deep_merge(base, override)
    merged["logging"]["fmt"]["style"] = "long"
    merged["logging"]["level"] = "DEBUG"

    assert override == {"logging": {"fmt": {"style": "short"}}}
    assert base == {"logging": {"level": "INFO"}}
