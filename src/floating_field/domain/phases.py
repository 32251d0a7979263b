"""Field validation FSM: enum and pure phase derivation."""

from __future__ import annotations

from enum import Enum

from floating_field.domain.state import ValidationState


class FieldPhase(str, Enum):
    """Validation lifecycle of a field. There is no terminal phase."""

    UNTOUCHED = "untouched"
    VALID = "valid"
    INVALID = "invalid"


def field_phase(state: ValidationState) -> FieldPhase:
    """
    Pure derivation from the outcome: untouched until the first validate(),
    then valid or invalid by the last pass. reset() brings it back to untouched.
    """
    if not state.has_been_validated:
        return FieldPhase.UNTOUCHED
    if state.is_valid:
        return FieldPhase.VALID
    return FieldPhase.INVALID
