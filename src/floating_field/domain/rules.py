"""Validation rule value type and rule-set composition."""

from __future__ import annotations

from collections.abc import Callable, Iterable

from pydantic import BaseModel, ConfigDict, Field


class ValidationRule(BaseModel):
    """One predicate over the field text plus the message shown when it fails."""

    model_config = ConfigDict(frozen=True)

    predicate: Callable[[str], bool] = Field(..., description="Pure check; True means the text passes")
    message: str = Field(..., description="Shown when the predicate returns False")
    applies_while_editing: bool = Field(
        default=True,
        description="If False, skipped on keystroke passes unless the field is in real-time mode",
    )

    def evaluate(self, text: str) -> bool:
        """Run the predicate. Exceptions from caller code are not caught."""
        return bool(self.predicate(text))


def rule_set(*parts: ValidationRule | Iterable[ValidationRule]) -> list[ValidationRule]:
    """Concatenate rules and sequences of rules, keeping order."""
    rules: list[ValidationRule] = []
    for part in parts:
        if isinstance(part, ValidationRule):
            rules.append(part)
        else:
            rules.extend(part)
    return rules
