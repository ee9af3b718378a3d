"""Unit tests for key classification heuristics."""

import pytest

from style_editor.config.profile_loader import ClassificationProfile
from style_editor.models.style_key import StyleType
from style_editor.pipeline.key_classification import (
    classify_type,
    is_subcomponent,
    should_skip,
    stringify_value,
)


@pytest.fixture
def profile():
    return ClassificationProfile(name="test")


@pytest.mark.parametrize(
    "value,expected",
    [
        ("#FFFFFF", "#FFFFFF"),
        (True, "true"),
        (False, "false"),
        (None, "null"),
        (16, "16"),
        (1.5, "1.5"),
    ],
)
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


class TestClassifyType:
    """Type order: color, bool, number, string."""

    @pytest.mark.parametrize(
        "name,value,expected",
        [
            ("text_color", "#FFFFFF", StyleType.COLOR),
            ("accent", "#1A73E8", StyleType.COLOR),
            ("background_color", "colors.background.base.level000", StyleType.COLOR),
            ("border_width", 1, StyleType.COLOR),
            ("show_timestamps", True, StyleType.BOOL),
            ("enabled", "false", StyleType.BOOL),
            ("font_size", 16, StyleType.NUMBER),
            ("font_weight", "500", StyleType.NUMBER),
            ("offset", "-4", StyleType.NUMBER),
            ("opacity", 0.5, StyleType.STRING),
            ("padding", "8px 12px", StyleType.STRING),
            ("font_family", "Inter", StyleType.STRING),
        ],
    )
    def test_classify_type(self, profile, name, value, expected):
        assert classify_type(name, value, profile) is expected

    def test_without_profile_uses_builtin_markers(self):
        assert classify_type("border_color", "red") is StyleType.COLOR
        assert classify_type("label", "red") is StyleType.STRING

    @pytest.mark.parametrize("value", ["1_000", " 12", "12 ", "1e3"])
    def test_non_plain_integers_are_strings(self, profile, value):
        assert classify_type("size", value, profile) is StyleType.STRING


class TestIsSubcomponent:
    """Nested objects with style-like member names become subcomponents."""

    def test_style_members(self, profile):
        assert is_subcomponent("header", {"background_color": "#FFF"}, profile)
        assert is_subcomponent("card", {"Padding": "4px"}, profile)

    def test_state_modifier_is_not_subcomponent(self, profile):
        assert not is_subcomponent("hover", {"background_color": "#FFF"}, profile)

    def test_plain_group_is_not_subcomponent(self, profile):
        assert not is_subcomponent("logo_image", {"url": "x", "alt": "y"}, profile)
        assert not is_subcomponent("empty", {}, profile)

    def test_only_direct_children_count(self, profile):
        assert not is_subcomponent("outer", {"inner": {"text_color": "#FFF"}}, profile)


class TestShouldSkip:
    """Non-style data is filtered out."""

    @pytest.mark.parametrize(
        "name,value,ancestors",
        [
            ("footer_text", None, ("login",)),
            ("logo", "data:image/png;base64,AAAA", ("login",)),
            ("icon_src", "https://example.com/send.svg", ("chatbox", "send_button")),
            ("url", "https://example.com/logo.png", ("nav", "logo_image")),
            ("alt", "Company", ("nav", "logo_image")),
            ("description", "x" * 101, ("chat",)),
        ],
    )
    def test_skipped(self, profile, name, value, ancestors):
        assert should_skip(name, value, ancestors, profile)

    @pytest.mark.parametrize(
        "name,value",
        [
            ("background_color", "#FFFFFF"),
            ("show_timestamps", False),
            ("width", 240),
            ("placeholder", "x" * 100),
        ],
    )
    def test_kept(self, profile, name, value):
        assert not should_skip(name, value, ("chat",), profile)

    def test_custom_limit(self):
        profile = ClassificationProfile(name="short", max_value_length=5)
        assert should_skip("placeholder", "Ask a question", ("chat",), profile)
