"""Validation state for one field: configured rules plus the outcome of the last pass."""

from __future__ import annotations

import logging

from pydantic import BaseModel, Field

from floating_field.domain.rules import ValidationRule

logger = logging.getLogger(__name__)


class ValidationState(BaseModel):
    """
    Owned by exactly one field. Starts untouched and valid; every validate() call
    marks it validated until reset() is called.
    """

    rules: list[ValidationRule] = Field(default_factory=list, description="Evaluated in order")
    real_time: bool = Field(default=False, description="Check every rule on keystrokes too")

    is_valid: bool = True
    errors: list[str] = Field(
        default_factory=list,
        description="Failing messages of the last pass; stops at the first failure so holds at most one",
    )
    has_been_validated: bool = False

    @property
    def current_error(self) -> str | None:
        """First error of the last pass, or None."""
        return self.errors[0] if self.errors else None

    def configure(self, rules: list[ValidationRule], real_time: bool = False) -> None:
        """Replace the rule set and real-time flag. The outcome is left as is."""
        self.rules = list(rules)
        self.real_time = real_time

    def validate(self, text: str, is_editing: bool = False) -> bool:
        """
        Run the rules against text in order and stop at the first failure.
        Rules with applies_while_editing=False are skipped when is_editing is True,
        unless real-time mode is on. Returns the new is_valid.

        has_been_validated, errors and is_valid are all assigned after the loop,
        so a predicate that raises leaves the previous outcome untouched,
        including has_been_validated.
        """
        errors: list[str] = []
        for rule in self.rules:
            if is_editing and not rule.applies_while_editing and not self.real_time:
                continue
            if not rule.evaluate(text):
                errors.append(rule.message)
                break

        # Assign together so observers never see a half-updated outcome.
        self.has_been_validated = True
        self.errors = errors
        self.is_valid = not errors
        logger.debug(
            "validate editing=%s rules=%d valid=%s error=%r",
            is_editing,
            len(self.rules),
            self.is_valid,
            self.current_error,
        )
        return self.is_valid

    def reset(self) -> None:
        """Back to untouched. Rules and real-time flag are kept."""
        self.is_valid = True
        self.errors = []
        self.has_been_validated = False
