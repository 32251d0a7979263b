"""Form runtime: one FieldController per configured field, validity collected by name."""

from __future__ import annotations

import logging

from floating_field.config.models import FormConfig
from floating_field.orchestration.controller import FieldController, ValidationObserver

logger = logging.getLogger(__name__)


class FormRuntime:
    """Holds config + controllers; routes events by field name; aggregates reported validity."""

    def __init__(self, config: FormConfig) -> None:
        self.config = config
        self.results: dict[str, bool] = {}
        self._fields: dict[str, FieldController] = {
            f.name: FieldController.from_config(f, self._observer_for(f.name))
            for f in config.fields
        }

    def _observer_for(self, name: str) -> ValidationObserver:
        def record(is_valid: bool) -> None:
            self.results[name] = is_valid
            logger.debug("form %r: %s reported valid=%s", self.config.name, name, is_valid)

        return record

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.config.fields]

    def field(self, name: str) -> FieldController:
        """Controller for a field. Raises KeyError for unknown names."""
        try:
            return self._fields[name]
        except KeyError:
            raise KeyError(f"Unknown field: {name}") from None

    def focus(self, name: str) -> None:
        self.field(name).focus()

    def type_text(self, name: str, text: str) -> None:
        """Keystroke path for a field."""
        self.field(name).set_text(text)

    def blur(self, name: str) -> None:
        """Commit path for a field."""
        self.field(name).blur()

    def enter(self, name: str, text: str) -> bool:
        """Focus, type text one character at a time, then commit. Returns the field validity."""
        f = self.field(name)
        f.focus()
        if f.text:
            f.set_text("")
        for i in range(1, len(text) + 1):
            f.set_text(text[: i])
        f.blur()
        return f.is_valid

    @property
    def required_field_names(self) -> list[str]:
        """Required and enabled: a disabled field takes no input and never reports."""
        return [f.name for f in self.config.fields if f.required and f.enabled]

    @property
    def all_valid(self) -> bool:
        """
        True once every required field has reported valid and no optional
        field has reported invalid.
        """
        if not all(self.results.get(name) is True for name in self.required_field_names):
            return False
        return all(self.results.values())

    def values(self) -> dict[str, str]:
        return {name: f.text for name, f in self._fields.items()}

    def reset(self) -> None:
        """Clear every field and forget reported validity."""
        for f in self._fields.values():
            f.reset()
        self.results.clear()
