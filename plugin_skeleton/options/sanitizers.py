"""
String cleaners and the per-kind sanitizers built on them.

Every cleaner is total and idempotent: nothing here raises on bad input, and
running a cleaner over its own output changes nothing.
"""
from __future__ import annotations

import re

from plugin_skeleton.options.schema import FieldDescriptor, OptionValue, RawSubmission

_SCRIPT_STYLE_RE = re.compile(r"<(script|style)[^>]*?>.*?</\1\s*>", re.IGNORECASE | re.DOTALL)
# an unclosed "<" swallows the rest of the string, so no "<" ever survives
_TAG_RE = re.compile(r"<[^>]*(?:>|\Z)")
# NEL, LINE SEPARATOR and PARAGRAPH SEPARATOR also end a line for str.splitlines()
_LINE_BREAKS_RE = re.compile(r"[\r\n\t\x85\u2028\u2029]+")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")
_SLUG_RE = re.compile(r"[^a-z0-9_\-]")

_EMAIL_LOCAL_RE = re.compile(r"[^a-zA-Z0-9!#$%&'*+/=?^_`{|}~.\-]")
_EMAIL_LABEL_RE = re.compile(r"[^a-z0-9\-]", re.IGNORECASE)
_EMAIL_MIN_LENGTH = 6


def strip_tags(value: str) -> str:
    value = _SCRIPT_STYLE_RE.sub("", value)
    return _TAG_RE.sub("", value)


def sanitize_text_field(value: str) -> str:
    """Plain single-line text: no markup, no line breaks, trimmed."""
    value = strip_tags(value)
    value = _LINE_BREAKS_RE.sub(" ", value)
    value = _CONTROL_RE.sub("", value)
    return value.strip()


def sanitize_textarea_field(value: str) -> str:
    """Plain multi-line text: like sanitize_text_field but keeps newlines."""
    value = value.replace("\r\n", "\n").replace("\r", "\n")
    value = strip_tags(value)
    value = _CONTROL_RE.sub("", value)
    return value.strip()


def sanitize_key(value: str) -> str:
    """Slug: lowercase, only a-z 0-9 _ -."""
    return _SLUG_RE.sub("", value.lower())


def sanitize_email(value: str) -> str:
    """
    Reduce `value` to a plausible address, or "" when nothing usable is left.

    The local part keeps the RFC 5322 atom characters; the domain must have at
    least two dot-separated labels of letters, digits and hyphens.
    """
    value = sanitize_text_field(value)

    if len(value) < _EMAIL_MIN_LENGTH:
        return ""
    if value.find("@", 1) == -1:
        return ""

    local, domain = value.split("@", 1)

    local = _EMAIL_LOCAL_RE.sub("", local)
    if not local:
        return ""

    if ".." in domain:
        return ""
    domain = domain.strip(" \t\n\r\0\x0b.")
    if not domain:
        return ""

    labels = []
    for label in domain.split("."):
        label = _EMAIL_LABEL_RE.sub("", label.strip(" \t\n\r\0\x0b-"))
        if label:
            labels.append(label)
    if len(labels) < 2:
        return ""

    return f"{local}@{'.'.join(labels)}"


# -----------------------
# Per-kind sanitizers
# -----------------------

def _string_value(field: FieldDescriptor, submission: RawSubmission) -> str | None:
    raw = submission.get(field.name)
    return None if raw is None else str(raw)


def sanitize_checkbox(field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
    # browsers omit unchecked boxes, so presence alone means "checked"
    return field.name in submission


def sanitize_choice(field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
    raw = _string_value(field, submission)
    return "" if raw is None else sanitize_key(raw)


def sanitize_text(field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
    raw = _string_value(field, submission)
    return "" if raw is None else sanitize_text_field(raw)


def sanitize_textarea(field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
    raw = _string_value(field, submission)
    return "" if raw is None else sanitize_textarea_field(raw)


def sanitize_email_field(field: FieldDescriptor, submission: RawSubmission) -> OptionValue:
    raw = _string_value(field, submission)
    return "" if raw is None else sanitize_email(raw)
