from __future__ import annotations

import enum
from typing import Dict, FrozenSet, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, model_validator

# What a form post hands us: absent key = not submitted (unchecked checkbox)
RawSubmission = Mapping[str, Optional[str]]

OptionValue = Union[bool, str]
SanitizedOptions = Dict[str, OptionValue]


class FieldKind(str, enum.Enum):
    TEXT = "text"
    TEXTAREA = "textarea"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    SELECT = "select"
    EMAIL = "email"


CHOICE_KINDS = frozenset({FieldKind.RADIO, FieldKind.SELECT})


class Choice(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class FieldDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    kind: FieldKind = FieldKind.TEXT
    label: str = ""
    description: str = ""
    choices: Tuple[Choice, ...] = ()
    default: OptionValue = ""
    required: bool = False

    @property
    def allowed_values(self) -> FrozenSet[str]:
        return frozenset(c.value for c in self.choices)

    @model_validator(mode="after")
    def validate_descriptor(self):
        if not self.name:
            raise ValueError("field requires a name")

        if self.kind in CHOICE_KINDS:
            # sanitizers imports this module
            from plugin_skeleton.options.sanitizers import sanitize_key

            if not self.choices:
                raise ValueError(f"{self.kind.value} field requires choices: {self.name}")
            # submitted values are slugged, so only slug choices can ever match
            for choice in self.choices:
                if sanitize_key(choice.value) != choice.value:
                    raise ValueError(f"choice value must be a slug: {self.name}={choice.value!r}")
            if self.default and self.default not in self.allowed_values:
                raise ValueError(f"default is not one of the choices: {self.name}={self.default!r}")
        elif self.choices:
            raise ValueError(f"{self.kind.value} field does not take choices: {self.name}")

        if self.kind == FieldKind.CHECKBOX:
            if not isinstance(self.default, bool):
                raise ValueError(f"checkbox default must be a bool: {self.name}")
        elif isinstance(self.default, bool):
            raise ValueError(f"{self.kind.value} default must be a string: {self.name}")

        return self


class SettingsGroup(BaseModel):
    """
    One options page/tab: an ordered, immutable list of field descriptors.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    description: str = ""
    descriptors: Tuple[FieldDescriptor, ...]

    @model_validator(mode="after")
    def validate_group(self):
        names = [f.name for f in self.descriptors]
        if len(names) != len(set(names)):
            raise ValueError("duplicate field names")
        return self

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(f.name for f in self.descriptors)

    def field(self, name: str) -> FieldDescriptor:
        for f in self.descriptors:
            if f.name == name:
                return f
        raise KeyError(f"field not declared in {self.id}: {name}")

    def defaults(self) -> SanitizedOptions:
        return {f.name: f.default for f in self.descriptors}
