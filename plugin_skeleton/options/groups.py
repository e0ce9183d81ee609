from __future__ import annotations
from typing import Dict, List

from plugin_skeleton.options.schema import Choice, FieldDescriptor, FieldKind, SettingsGroup

GENERAL_OPTIONS = SettingsGroup(
    id="general_options",
    title="General",
    description="General options.",
    descriptors=(
        FieldDescriptor(
            name="debug",
            kind=FieldKind.CHECKBOX,
            label="Debug",
            description="This is an example of a checkbox",
            default=False,
        ),
    ),
)

INPUT_EXAMPLES = SettingsGroup(
    id="input_examples",
    title="Input Examples",
    description="Provides examples of the five basic element types.",
    descriptors=(
        FieldDescriptor(
            name="input_example",
            kind=FieldKind.TEXT,
            label="Input Element",
            default="default input example",
        ),
        FieldDescriptor(
            name="textarea_example",
            kind=FieldKind.TEXTAREA,
            label="Textarea Element",
        ),
        FieldDescriptor(
            name="checkbox_example",
            kind=FieldKind.CHECKBOX,
            label="Checkbox Element",
            description="This is an example of a checkbox",
            default=False,
        ),
        FieldDescriptor(
            name="radio_example",
            kind=FieldKind.RADIO,
            label="Radio Button Elements",
            choices=(
                Choice(value="1", label="Option One"),
                Choice(value="2", label="Option Two"),
            ),
            default="2",
        ),
        FieldDescriptor(
            name="time_options",
            kind=FieldKind.SELECT,
            label="Select Element",
            choices=(
                Choice(value="default", label="Select a time option..."),
                Choice(value="never", label="Never"),
                Choice(value="sometimes", label="Sometimes"),
                Choice(value="always", label="Always"),
            ),
            default="default",
        ),
    ),
)

# Frontend form; submissions become ContactMessage rows, not options
CONTACT_FORM = SettingsGroup(
    id="contact_form",
    title="Contact",
    descriptors=(
        FieldDescriptor(name="email", kind=FieldKind.EMAIL, label="E-mail", required=True),
        FieldDescriptor(name="subject", kind=FieldKind.TEXT, label="Subject", required=True),
        FieldDescriptor(name="body", kind=FieldKind.TEXTAREA, label="Body", required=True),
    ),
)


class SchemaRegistry:
    """Settings groups exposed as option tabs, in tab order."""

    def __init__(self) -> None:
        self._groups: Dict[str, SettingsGroup] = {}

    def register(self, group: SettingsGroup) -> None:
        if group.id in self._groups:
            raise ValueError(f"settings group already registered: {group.id}")
        self._groups[group.id] = group

    def get(self, group_id: str) -> SettingsGroup:
        if group_id not in self._groups:
            raise KeyError(f"settings group not registered: {group_id}")
        return self._groups[group_id]

    def all(self) -> List[SettingsGroup]:
        return list(self._groups.values())


def build_schema_registry() -> SchemaRegistry:
    reg = SchemaRegistry()
    reg.register(GENERAL_OPTIONS)
    reg.register(INPUT_EXAMPLES)
    return reg
