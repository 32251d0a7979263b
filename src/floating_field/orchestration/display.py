"""Build the renderer-facing display state of a field from its controller."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field

from floating_field.orchestration.controller import FieldController

Tone = Literal["error", "focused", "idle"]


class DisplayState(BaseModel):
    """What a renderer needs to draw one field. Derived, never stored."""

    label: str
    text: str
    label_floats: bool = Field(..., description="Label sits above the text when filled or focused")
    supporting_text: str | None = Field(default=None, description="Error, else helper text")
    is_error: bool = False
    show_success_icon: bool = False
    tone: Tone = "idle"
    is_enabled: bool = True
    is_secure: bool = False


def build_display(field: FieldController) -> DisplayState:
    is_error = field.current_error is not None
    if is_error:
        tone: Tone = "error"
    elif field.is_editing:
        tone = "focused"
    else:
        tone = "idle"
    return DisplayState(
        label=field.label,
        text=field.text,
        label_floats=bool(field.text) or field.is_editing,
        supporting_text=field.supporting_text,
        is_error=is_error,
        show_success_icon=field.has_been_validated and bool(field.text) and field.is_valid,
        tone=tone,
        is_enabled=field.is_enabled,
        is_secure=field.secure,
    )


def render_field(field: FieldController) -> str:
    """
    One-line terminal rendering, e.g. "[Email] a@b.co  ok" or
    "Email: ____  ! This field is required".
    """
    d = build_display(field)
    shown = "*" * len(d.text) if d.is_secure else d.text
    if d.label_floats:
        parts = [f"[{d.label}] {shown}"]
    else:
        parts = [f"{d.label}: ____"]
    if d.show_success_icon:
        parts.append("ok")
    if d.supporting_text:
        marker = "!" if d.is_error else "i"
        parts.append(f"{marker} {d.supporting_text}")
    if not d.is_enabled:
        parts.append("(disabled)")
    return "  ".join(parts)
