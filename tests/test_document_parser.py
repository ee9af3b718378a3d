"""Unit tests for building the component tree."""

import pytest

from style_editor.config import get_source_document_path
from style_editor.config.profile_loader import ClassificationProfile
from style_editor.config.profile_manager import profile_override
from style_editor.models.style_key import StyleType
from style_editor.pipeline.document_parser import parse_document
from style_editor.pipeline.errors import DocumentLoadError
from style_editor.pipeline.reader import parse_style_text


@pytest.fixture
def profile():
    return ClassificationProfile(name="test")


@pytest.fixture
def document(profile):
    text = get_source_document_path().read_text(encoding="utf-8")
    return parse_style_text(text, profile=profile)


def _key_ids(node):
    return [key.id for key in node.keys]


class TestBundledDocument:
    """Parse the bundled interface style document."""

    def test_components_in_order(self, document):
        assert [c.id for c in document.components] == ["chat", "chatbox", "nav", "dashboard", "login"]

    def test_component_labels_and_comments(self, document):
        chat = document.find_component("chat")
        assert chat.label == "Chat"
        assert chat.comment == "Conversation view with message bubbles"
        assert document.find_component("nav").comment is None

    def test_component_range(self, document):
        chat = document.find_component("chat")
        assert (chat.start_line_number, chat.end_line_number) == (6, 35)

    def test_direct_keys_with_flattened_state(self, document):
        chat = document.find_component("chat")
        assert _key_ids(chat) == [
            "background_color",
            "text_color",
            "border_radius",
            "show_timestamps",
            "max_messages",
            "hover.background_color",
        ]
        hover = chat.find_key("hover.background_color")
        assert hover.label == "Hover / Background Color"
        assert hover.line_number == 33
        assert hover.path == ("hover", "background_color")
        assert hover.name == "background_color"

    def test_key_types(self, document):
        chat = document.find_component("chat")
        assert chat.find_key("background_color").type is StyleType.COLOR
        assert chat.find_key("show_timestamps").type is StyleType.BOOL
        assert chat.find_key("show_timestamps").value == "true"
        assert chat.find_key("max_messages").type is StyleType.NUMBER
        assert chat.find_key("max_messages").value == "200"

    def test_subcomponents(self, document):
        chat = document.find_component("chat")
        assert [s.id for s in chat.subcomponents] == ["header", "user_message", "assistant_message"]

        header = chat.find_subcomponent("header")
        assert header.label == "Header"
        assert (header.start_line_number, header.end_line_number) == (13, 18)
        assert header.find_key("background_color").line_number == 14
        assert header.find_key("font_size").type is StyleType.NUMBER

        user_message = chat.find_subcomponent("user_message")
        assert _key_ids(user_message) == ["background_color", "text_color", "padding", "hover.background_color"]
        assert user_message.find_key("hover.background_color").line_number == 24

    def test_assets_and_nulls_skipped(self, document):
        chatbox = document.find_component("chatbox")
        send_button = chatbox.find_subcomponent("send_button")
        assert _key_ids(send_button) == ["background_color", "disabled.background_color"]

        nav = document.find_component("nav")
        assert _key_ids(nav) == ["background_color", "text_color", "collapsed", "width"]
        assert [s.id for s in nav.subcomponents] == ["item"]

        login = document.find_component("login")
        assert _key_ids(login) == ["background_color", "accent", "remember_me"]

    def test_state_group_in_component_is_not_subcomponent(self, document):
        chatbox = document.find_component("chatbox")
        assert [s.id for s in chatbox.subcomponents] == ["send_button"]
        assert chatbox.find_key("focused.border_color").line_number == 43

    def test_reserved_member_skipped(self, document):
        assert document.find_component("semantic_tokens") is None


class TestParseDocument:
    """parse_document on decoded values."""

    def test_root_must_be_object(self, profile):
        with pytest.raises(DocumentLoadError):
            parse_document(["chat"], profile=profile)

    def test_non_object_members_skipped(self, profile):
        components = parse_document({"version": 2, "theme": "light", "chat": {"text_color": "#000"}}, profile=profile)
        assert [c.id for c in components] == ["chat"]

    def test_arrays_ignored(self, profile):
        components = parse_document(
            {"chat": {"text_color": "#000", "gradient": ["#000", "#FFF"], "hover": {"stops": [1, 2]}}},
            profile=profile,
        )
        assert _key_ids(components[0]) == ["text_color"]

    def test_without_line_index(self, profile):
        components = parse_document({"chat": {"header": {"text_color": "#000"}}}, profile=profile)
        chat = components[0]
        assert chat.start_line_number is None
        header = chat.find_subcomponent("header")
        assert header.end_line_number is None
        assert header.find_key("text_color").line_number is None

    def test_deep_nesting_flattened_in_subcomponent(self, profile):
        components = parse_document(
            {"chat": {"header": {"text_color": "#000", "title": {"hover": {"text_color": "#111"}}}}},
            profile=profile,
        )
        header = components[0].find_subcomponent("header")
        assert _key_ids(header) == ["text_color", "title.hover.text_color"]
        assert header.find_key("title.hover.text_color").label == "Title / Hover / Text Color"

    def test_empty_component(self, profile):
        components = parse_document({"spacer": {}}, profile=profile)
        assert components[0].keys == []
        assert components[0].subcomponents == []

    def test_custom_reserved_keys(self):
        profile = ClassificationProfile(name="custom", reserved_keys=["chat"])
        components = parse_document({"chat": {"text_color": "#000"}, "nav": {"text_color": "#FFF"}}, profile=profile)
        assert [c.id for c in components] == ["nav"]

    def test_uses_active_profile_when_none_given(self):
        components = parse_document({"semantic_tokens": {"a": "b"}, "nav": {"text_color": "#FFF"}})
        assert [c.id for c in components] == ["nav"]

    def test_active_profile_override(self):
        strict = ClassificationProfile(name="strict", reserved_keys=["nav"])
        with profile_override(strict):
            components = parse_document({"nav": {"text_color": "#FFF"}, "chat": {"text_color": "#000"}})
        assert [c.id for c in components] == ["chat"]

    def test_duplicate_component_keeps_first(self, profile):
        text = (
            '{\n  "nav": {\n    "text_color": "#FFFFFF"\n  },\n'
            '  "nav": {\n    "text_color": "#000000",\n    "border_color": "#111111"\n  }\n}\n'
        )
        document = parse_style_text(text, profile=profile)

        assert [c.id for c in document.components] == ["nav"]
        nav = document.find_component("nav")
        assert (nav.start_line_number, nav.end_line_number) == (2, 4)
        assert [(k.id, k.value, k.line_number) for k in nav.keys] == [("text_color", "#FFFFFF", 3)]
