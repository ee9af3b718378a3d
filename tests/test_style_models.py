"""Unit tests for the style document data models."""

import pytest

from style_editor.models import (
    InvalidValueError,
    PreviewMode,
    StyleComponent,
    StyleDocument,
    StyleKey,
    StyleSubcomponent,
    StyleType,
    encode_value,
)


def _key(key_id="text_color", value="#000000", style_type=StyleType.COLOR):
    return StyleKey(id=key_id, label="Text Color", type=style_type, value=value)


class TestEncodeValue:
    """Typed values are validated against the key's StyleType."""

    @pytest.mark.parametrize(
        "style_type,value,expected",
        [
            (StyleType.BOOL, True, "true"),
            (StyleType.BOOL, "false", "false"),
            (StyleType.NUMBER, 16, "16"),
            (StyleType.NUMBER, 2.0, "2.0"),
            (StyleType.NUMBER, " 1.5 ", "1.5"),
            (StyleType.COLOR, "#1A73E8", "#1A73E8"),
            (StyleType.COLOR, "#FFF", "#FFF"),
            (StyleType.COLOR, "colors.background.base.level000", "colors.background.base.level000"),
            (StyleType.FONT, "Inter", "Inter"),
            (StyleType.STRING, "8px 12px", "8px 12px"),
        ],
    )
    def test_valid(self, style_type, value, expected):
        assert encode_value(style_type, value) == expected

    @pytest.mark.parametrize(
        "style_type,value",
        [
            (StyleType.BOOL, "yes"),
            (StyleType.BOOL, 1),
            (StyleType.NUMBER, True),
            (StyleType.NUMBER, "12px"),
            (StyleType.COLOR, "#GGGGGG"),
            (StyleType.COLOR, "colors..background"),
            (StyleType.COLOR, "red green"),
            (StyleType.STRING, 12),
        ],
    )
    def test_invalid(self, style_type, value):
        with pytest.raises(InvalidValueError):
            encode_value(style_type, value)

    def test_invalid_value_error_is_value_error(self):
        assert issubclass(InvalidValueError, ValueError)


class TestStyleKey:
    """StyleKey paths and typed access."""

    def test_path_from_id(self):
        key = _key("hover.text_color")
        assert key.path == ("hover", "text_color")
        assert key.name == "text_color"

    def test_typed_value(self):
        assert _key("enabled", "true", StyleType.BOOL).typed_value is True
        assert _key("size", "16", StyleType.NUMBER).typed_value == 16
        assert _key("ratio", "1.5", StyleType.NUMBER).typed_value == 1.5
        assert _key("size", "auto", StyleType.NUMBER).typed_value == "auto"
        assert _key().typed_value == "#000000"

    def test_set_typed_value(self):
        key = _key("enabled", "true", StyleType.BOOL)
        key.set_typed_value(False)
        assert key.value == "false"

        with pytest.raises(InvalidValueError):
            key.set_typed_value("maybe")
        assert key.value == "false"


class TestStyleComponent:
    """Component and subcomponent lookups."""

    def test_find(self):
        header = StyleSubcomponent(id="header", label="Header", keys=[_key()])
        chat = StyleComponent(id="chat", label="Chat", keys=[_key("background_color")], subcomponents=[header])

        assert chat.find_key("background_color") is chat.keys[0]
        assert chat.find_key("text_color") is None
        assert chat.find_subcomponent("header") is header
        assert header.find_key("text_color") is header.keys[0]

    @pytest.mark.parametrize("node_type", [StyleComponent, StyleSubcomponent])
    def test_invalid_range(self, node_type):
        with pytest.raises(ValueError):
            node_type(id="x", label="X", start_line_number=5, end_line_number=2)


class TestStyleDocument:
    """Document snapshot and reset."""

    def test_duplicate_component_ids(self):
        with pytest.raises(ValueError, match="Duplicate"):
            StyleDocument(components=[StyleComponent(id="chat", label="A"), StyleComponent(id="chat", label="B")])

    def test_restore_original(self):
        document = StyleDocument(components=[StyleComponent(id="chat", label="Chat", keys=[_key()])])
        document.components[0].keys[0].value = "#FFFFFF"

        document.restore_original()

        assert document.find_component("chat").find_key("text_color").value == "#000000"
        assert document.original_components[0] is not document.components[0]

    def test_find_component(self):
        document = StyleDocument(components=[StyleComponent(id="chat", label="Chat")])
        assert document.find_component(None) is None
        assert document.find_component("nav") is None


def test_preview_mode_toggle():
    assert PreviewMode.LIGHT.toggled() is PreviewMode.DARK
    assert PreviewMode.DARK.toggled() is PreviewMode.LIGHT
    assert PreviewMode.DARK.value == "Dark"
