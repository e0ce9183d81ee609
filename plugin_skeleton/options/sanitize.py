from __future__ import annotations

from typing import List, Optional

from plugin_skeleton.options.errors import FieldError
from plugin_skeleton.options.registry import FieldKindRegistry, default_field_registry
from plugin_skeleton.options.sanitizers import sanitize_text_field
from plugin_skeleton.options.schema import (
    CHOICE_KINDS,
    FieldKind,
    RawSubmission,
    SanitizedOptions,
    SettingsGroup,
)


def sanitize(
    group: SettingsGroup,
    submission: RawSubmission,
    registry: Optional[FieldKindRegistry] = None,
) -> SanitizedOptions:
    """
    Clean a raw form submission against a settings group.

    Total and pure: every declared field gets a value (absent text-like fields
    become "", absent checkboxes False), keys the group does not declare are
    dropped, and nothing is ever rejected. Choice fields are only normalized to
    a slug here; membership in the declared choices is checked by validate().
    """
    registry = registry or default_field_registry
    return {
        field.name: registry.get(field.kind).sanitizer(field, submission)
        for field in group.descriptors
    }


def validate(
    group: SettingsGroup,
    submission: RawSubmission,
    registry: Optional[FieldKindRegistry] = None,
) -> List[FieldError]:
    """
    Strict pass over the sanitized values. Returns errors in field order; an
    empty list means the submission can be stored as sanitize() returns it.
    """
    cleaned = sanitize(group, submission, registry)
    errors: List[FieldError] = []

    for field in group.descriptors:
        value = cleaned[field.name]

        if field.kind in CHOICE_KINDS:
            if value and value not in field.allowed_values:
                errors.append(FieldError(field.name, "invalid_choice"))
            elif field.required and not value:
                errors.append(FieldError(field.name, "required"))

        elif field.kind == FieldKind.EMAIL:
            if value:
                continue
            raw = submission.get(field.name)
            if raw is not None and sanitize_text_field(str(raw)):
                errors.append(FieldError(field.name, "invalid_email"))
            elif field.required:
                errors.append(FieldError(field.name, "required"))

        elif field.required and not value:
            errors.append(FieldError(field.name, "required"))

    return errors
