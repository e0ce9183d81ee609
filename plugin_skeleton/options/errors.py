from __future__ import annotations
from dataclasses import dataclass
from typing import List

_MESSAGES = {
    "required": "This field is required.",
    "invalid_choice": "Please select one of the offered options.",
    "invalid_email": "Please enter a valid e-mail address.",
}


@dataclass(frozen=True)
class FieldError:
    field: str
    reason: str  # required | invalid_choice | invalid_email

    @property
    def message(self) -> str:
        return _MESSAGES.get(self.reason, self.reason)

    def as_dict(self) -> dict:
        return {"field": self.field, "reason": self.reason}


class SubmissionRejected(ValueError):
    def __init__(self, group_id: str, errors: List[FieldError]) -> None:
        self.group_id = group_id
        self.errors = list(errors)
        super().__init__(f"{group_id}: " + ", ".join(f"{e.field}={e.reason}" for e in self.errors))
