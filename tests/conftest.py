"""Pytest fixtures: example configs, rule sets, controllers."""

from __future__ import annotations

from pathlib import Path

import pytest

from floating_field.config.models import FieldConfig, FormConfig, RuleConfig
from floating_field.domain import validators
from floating_field.domain.rules import ValidationRule
from floating_field.domain.state import ValidationState
from floating_field.orchestration.controller import FieldController


@pytest.fixture
def minimal_config() -> FormConfig:
    """Minimal valid form config for tests."""
    return FormConfig(
        name="TestForm",
        fields=[
            FieldConfig(
                name="email",
                label="Email",
                helper_text="Work address preferred",
                rules=[RuleConfig(kind="required"), RuleConfig(kind="email")],
            ),
            FieldConfig(
                name="name",
                label="Name",
                real_time=True,
                rules=[RuleConfig(kind="required"), RuleConfig(kind="min_length", value=3)],
            ),
        ],
    )


@pytest.fixture
def required_then_min3() -> list[ValidationRule]:
    return [validators.required(), validators.min_length(3)]


@pytest.fixture
def state(required_then_min3: list[ValidationRule]) -> ValidationState:
    """Untouched state with [required, min_length(3)], real-time off."""
    s = ValidationState()
    s.configure(required_then_min3, real_time=False)
    return s


@pytest.fixture
def observed_field() -> tuple[FieldController, list[bool]]:
    """Field with [required, min_length(3)] whose observer records every notification."""
    seen: list[bool] = []
    field = FieldController(
        label="Username",
        rules=[validators.required(), validators.min_length(3)],
        helper_text="3 or more characters",
        on_validation_change=seen.append,
    )
    return field, seen


@pytest.fixture
def configs_dir() -> Path:
    """Path to configs directory."""
    return Path(__file__).resolve().parent.parent / "configs"
