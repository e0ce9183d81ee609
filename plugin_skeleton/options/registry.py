from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, Protocol

from markupsafe import Markup

from plugin_skeleton.options import renderers, sanitizers
from plugin_skeleton.options.schema import FieldDescriptor, FieldKind, OptionValue, RawSubmission


class Sanitizer(Protocol):
    def __call__(self, field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
        ...


class Renderer(Protocol):
    def __call__(self, field: FieldDescriptor, value: OptionValue | None) -> Markup:
        ...


@dataclass(frozen=True)
class FieldKindHandler:
    sanitizer: Sanitizer
    renderer: Renderer


class FieldKindRegistry:
    def __init__(self, *, fallback: FieldKind = FieldKind.TEXT) -> None:
        self._handlers: Dict[FieldKind, FieldKindHandler] = {}
        self._fallback = fallback

    def register(self, kind: FieldKind, *, sanitizer: Sanitizer, renderer: Renderer) -> None:
        self._handlers[kind] = FieldKindHandler(sanitizer=sanitizer, renderer=renderer)

    def get(self, kind: FieldKind) -> FieldKindHandler:
        # kinds nobody registered are handled as plain text
        handler = self._handlers.get(kind) or self._handlers.get(self._fallback)
        if handler is None:
            raise KeyError(f"no handler for field kind {kind} and no fallback registered")
        return handler

    def render(self, field: FieldDescriptor, value: OptionValue | None) -> Markup:
        return self.get(field.kind).renderer(field, value)


def build_field_registry() -> FieldKindRegistry:
    reg = FieldKindRegistry()
    reg.register(FieldKind.TEXT, sanitizer=sanitizers.sanitize_text, renderer=renderers.render_text)
    reg.register(FieldKind.TEXTAREA, sanitizer=sanitizers.sanitize_textarea, renderer=renderers.render_textarea)
    reg.register(FieldKind.CHECKBOX, sanitizer=sanitizers.sanitize_checkbox, renderer=renderers.render_checkbox)
    reg.register(FieldKind.RADIO, sanitizer=sanitizers.sanitize_choice, renderer=renderers.render_radio)
    reg.register(FieldKind.SELECT, sanitizer=sanitizers.sanitize_choice, renderer=renderers.render_select)
    reg.register(FieldKind.EMAIL, sanitizer=sanitizers.sanitize_email_field, renderer=renderers.render_email)
    return reg


# Build registry once (module-level). Handlers are pure / stateless.
default_field_registry = build_field_registry()
