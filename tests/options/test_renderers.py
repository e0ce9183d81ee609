"""Tests for per-kind HTML renderers and their registry."""

import pytest

from plugin_skeleton.options.groups import CONTACT_FORM, GENERAL_OPTIONS, INPUT_EXAMPLES
from plugin_skeleton.options.registry import FieldKindRegistry, default_field_registry
from plugin_skeleton.options.schema import FieldKind


def render(group, name, value):
    field = group.field(name)
    return str(default_field_registry.render(field, value))


class TestRenderers:
    def test_text_value_is_escaped(self) -> None:
        html = render(INPUT_EXAMPLES, "input_example", '"><script>x</script>')
        assert 'type="text"' in html
        assert "<script>" not in html
        assert "&#34;&gt;&lt;script&gt;" in html

    def test_textarea(self) -> None:
        html = render(INPUT_EXAMPLES, "textarea_example", "a & b")
        assert html.startswith('<textarea id="textarea_example" name="textarea_example"')
        assert ">a &amp; b</textarea>" in html

    def test_checkbox_checked_and_label(self) -> None:
        html = render(GENERAL_OPTIONS, "debug", True)
        assert 'type="checkbox"' in html
        assert 'value="1" checked' in html
        assert '<label for="debug">This is an example of a checkbox</label>' in html

    def test_checkbox_unchecked(self) -> None:
        assert "checked" not in render(GENERAL_OPTIONS, "debug", False)

    def test_radio_marks_current_choice(self) -> None:
        html = render(INPUT_EXAMPLES, "radio_example", "2")
        assert html.count('type="radio"') == 2
        assert 'id="radio_example_2" name="radio_example" value="2" checked' in html
        assert 'value="1" checked' not in html

    def test_select_marks_current_option(self) -> None:
        html = render(INPUT_EXAMPLES, "time_options", "always")
        assert html.count("<option") == 4
        assert '<option value="always" selected>Always</option>' in html
        assert '<option value="never">Never</option>' in html

    def test_required_email(self) -> None:
        html = render(CONTACT_FORM, "email", "")
        assert 'type="email"' in html
        assert " required" in html

    def test_none_value_renders_empty(self) -> None:
        assert 'value=""' in render(INPUT_EXAMPLES, "input_example", None)


class TestRegistry:
    def test_every_kind_registered(self) -> None:
        for kind in FieldKind:
            assert default_field_registry.get(kind) is not None

    def test_missing_kind_without_fallback_handler(self) -> None:
        with pytest.raises(KeyError, match="no handler"):
            FieldKindRegistry().get(FieldKind.RADIO)
