"""Config validation: malformed YAML, missing fields, invalid rule kinds."""

from __future__ import annotations

import tempfile
from pathlib import Path

import pytest
import yaml

from floating_field.config.loader import load_config
from floating_field.config.models import FieldConfig, FormConfig, RuleConfig


def _write_yaml(data: object) -> str:
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        yaml.dump(data, f)
        return f.name


def test_load_signup_config(configs_dir: Path) -> None:
    """Shipped sign-up YAML loads and validates."""
    config = load_config(configs_dir / "signup_form.yaml")
    assert config.name == "Create account"
    assert [f.name for f in config.fields][:3] == ["full_name", "email", "username"]
    website = next(f for f in config.fields if f.name == "website")
    assert website.required is False
    assert website.helper_text


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "nope.yaml")


def test_load_malformed_yaml_raises() -> None:
    """Malformed YAML raises."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("fields: [\n  bar\n")  # invalid YAML
        path = f.name
    try:
        with pytest.raises((yaml.YAMLError, ValueError)):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_empty_file_raises() -> None:
    """Empty YAML raises ValueError."""
    with tempfile.NamedTemporaryFile(mode="w", suffix=".yaml", delete=False) as f:
        f.write("")
        path = f.name
    try:
        with pytest.raises(ValueError, match="empty|Invalid"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_missing_fields_raises() -> None:
    path = _write_yaml({"name": "OnlyName"})
    try:
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_load_invalid_rule_kind_raises() -> None:
    path = _write_yaml(
        {
            "name": "A",
            "fields": [{"name": "x", "label": "X", "rules": [{"kind": "server_unique"}]}],
        }
    )
    try:
        with pytest.raises(ValueError, match="Invalid config"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_duplicate_field_names_rejected() -> None:
    path = _write_yaml(
        {
            "fields": [
                {"name": "email", "label": "Email"},
                {"name": "email", "label": "Email again"},
            ],
        }
    )
    try:
        with pytest.raises(ValueError, match="Duplicate field name"):
            load_config(path)
    finally:
        Path(path).unlink(missing_ok=True)


def test_field_config_defaults() -> None:
    config = FormConfig(fields=[FieldConfig(name="email", label="Email")])
    field = config.fields[0]
    assert config.name == "Form"
    assert field.real_time is False
    assert field.required is True
    assert field.enabled is True
    assert field.helper_text is None
    assert field.rules == []


def test_rule_config_defaults() -> None:
    rule = RuleConfig(kind="password")
    assert rule.value is None
    assert rule.require_numbers is True
    assert rule.require_special_chars is True
    assert rule.applies_while_editing is True
    assert rule.message is None
