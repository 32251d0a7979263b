"""Pydantic models for form configuration. Central contract for IDE and validation."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, field_validator


# --- Rule configuration ---

RuleKind = Literal[
    "required",
    "email",
    "min_length",
    "max_length",
    "alphanumeric",
    "alphabetic",
    "numeric",
    "phone_number",
    "url",
    "password",
    "pattern",
]


class RuleConfig(BaseModel):
    """One catalog rule as declared in YAML."""

    kind: RuleKind = Field(..., description="Catalog rule to build")
    # min_length / max_length bound, or password minimum length
    value: int | None = Field(default=None, ge=0)
    # For kind="pattern", the text must fully match this regex
    pattern: str | None = Field(default=None, description="Regex for pattern rules")
    require_numbers: bool = True
    require_special_chars: bool = True
    message: str | None = Field(default=None, description="Overrides the catalog message")
    applies_while_editing: bool = Field(
        default=True,
        description="If False, only checked on commit unless the field is real-time",
    )


# --- Field ---


class FieldConfig(BaseModel):
    """Configuration for a single text field."""

    name: str = Field(..., min_length=1, description="Unique field identifier (e.g. email)")
    label: str = Field(..., description="Floating label text")
    helper_text: str | None = Field(
        default=None,
        description="Shown below the field when there is no error",
    )
    real_time: bool = Field(default=False, description="Validate on every keystroke")
    # Required fields must report valid before the form counts as valid
    required: bool = True
    enabled: bool = True
    secure: bool = Field(default=False, description="Mask the text when rendered (passwords)")
    rules: list[RuleConfig] = Field(default_factory=list, description="Evaluated in order")


# --- Top-level form config ---


class FormConfig(BaseModel):
    """Full form configuration loaded from YAML."""

    name: str = Field(default="Form", description="Form display name")
    fields: list[FieldConfig] = Field(..., min_length=1, description="Fields in display order")

    @field_validator("fields")
    @classmethod
    def _unique_names(cls, fields: list[FieldConfig]) -> list[FieldConfig]:
        seen: set[str] = set()
        for f in fields:
            if f.name in seen:
                raise ValueError(f"Duplicate field name: {f.name}")
            seen.add(f.name)
        return fields
