"""Configuration loading and validation."""

from floating_field.config.models import (
    FieldConfig,
    FormConfig,
    RuleConfig,
)
from floating_field.config.loader import load_config

__all__ = [
    "FieldConfig",
    "FormConfig",
    "RuleConfig",
    "load_config",
]
