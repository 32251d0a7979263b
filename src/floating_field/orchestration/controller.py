"""Field controller: decides when validation fires (commit vs keystroke) and notifies an observer."""

from __future__ import annotations

import logging
from collections.abc import Callable

from floating_field.config.models import FieldConfig
from floating_field.domain.phases import FieldPhase, field_phase
from floating_field.domain.rules import ValidationRule
from floating_field.domain.state import ValidationState
from floating_field.domain.validators import build_rule

logger = logging.getLogger(__name__)

ValidationObserver = Callable[[bool], None]


class FieldController:
    """
    One text field: label, current text, focus flag, helper text and its own
    ValidationState. Hosts feed it focus(), set_text() and blur() events.
    """

    def __init__(
        self,
        label: str,
        rules: list[ValidationRule] | None = None,
        real_time: bool = False,
        helper_text: str | None = None,
        text: str = "",
        is_enabled: bool = True,
        secure: bool = False,
        on_validation_change: ValidationObserver | None = None,
    ) -> None:
        self.label = label
        self.text = text
        self.helper_text = helper_text
        self.is_enabled = is_enabled
        self.secure = secure
        self.is_editing = False
        self.on_validation_change = on_validation_change
        self.validation = ValidationState()
        self.validation.configure(rules or [], real_time=real_time)

    @classmethod
    def from_config(
        cls,
        config: FieldConfig,
        on_validation_change: ValidationObserver | None = None,
    ) -> FieldController:
        """Build a controller and its rule set from a declarative field config."""
        return cls(
            label=config.label,
            rules=[build_rule(r) for r in config.rules],
            real_time=config.real_time,
            helper_text=config.helper_text,
            is_enabled=config.enabled,
            secure=config.secure,
            on_validation_change=on_validation_change,
        )

    # --- outputs ---

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def current_error(self) -> str | None:
        return self.validation.current_error

    @property
    def has_been_validated(self) -> bool:
        return self.validation.has_been_validated

    @property
    def phase(self) -> FieldPhase:
        return field_phase(self.validation)

    @property
    def supporting_text(self) -> str | None:
        """Error takes precedence over helper text."""
        return self.current_error or self.helper_text

    # --- events ---

    def focus(self) -> None:
        self.is_editing = True

    def blur(self) -> None:
        """Commit: validate every rule when there is text, then notify."""
        self.is_editing = False
        if not self.text:
            logger.debug("%s: commit with empty text, not validating", self.label)
            return
        self._run(is_editing=False)

    def set_text(self, value: str) -> None:
        """
        Keystroke path. Validates only in real-time mode, or once the field has
        been validated before and has rules; otherwise just stores the text.
        """
        self.text = value
        if self.validation.real_time or (
            self.validation.has_been_validated and self.validation.rules
        ):
            self._run(is_editing=True)

    def reset(self, text: str = "") -> None:
        """Form clear: new text, untouched validation, rules kept."""
        self.text = text
        self.validation.reset()

    def _run(self, is_editing: bool) -> None:
        valid = self.validation.validate(self.text, is_editing=is_editing)
        logger.debug("%s: validated (editing=%s) -> %s", self.label, is_editing, valid)
        if self.on_validation_change is not None:
            self.on_validation_change(valid)
