"""Unit tests for profile loader and the active profile."""

import logging

import pytest
import yaml
from unittest.mock import patch

from style_editor.config.profile_loader import (
    ClassificationProfile,
    DEFAULT_RESERVED_KEYS,
    load_profile,
    list_available_profiles,
    get_default_profile,
    get_profiles_dir,
)
from style_editor.config.profile_manager import set_profile, get_profile, profile_override, reset_profile


@pytest.fixture(autouse=True)
def clean_profile():
    reset_profile()
    yield
    reset_profile()


class TestClassificationProfile:
    """Test ClassificationProfile dataclass."""

    def test_profile_creation_defaults(self):
        """Test creating ClassificationProfile with only a name."""
        profile = ClassificationProfile(name="test")

        assert profile.name == "test"
        assert profile.description == ""
        assert profile.reserved_keys == DEFAULT_RESERVED_KEYS
        assert "hover" in profile.state_modifiers
        assert profile.max_value_length == 100

    def test_defaults_are_not_shared(self):
        """Test each profile gets its own marker lists."""
        first = ClassificationProfile(name="a")
        first.reserved_keys.append("extra")

        assert "extra" not in ClassificationProfile(name="b").reserved_keys

    def test_profile_from_dict(self):
        """Test creating ClassificationProfile from dictionary."""
        data = {
            "name": "test",
            "description": "Test",
            "reserved_keys": ["tokens"],
            "color_name_markers": ["colour"],
            "max_value_length": "50",
        }

        profile = ClassificationProfile.from_dict(data)

        assert profile.name == "test"
        assert profile.reserved_keys == ["tokens"]
        assert profile.color_name_markers == ["colour"]
        assert profile.max_value_length == 50
        assert "color" in profile.subcomponent_markers

    def test_profile_to_dict(self):
        """Test converting ClassificationProfile to dictionary."""
        profile = ClassificationProfile(name="test", description="Test", skip_name_markers=["src"])

        data = profile.to_dict()

        assert data["name"] == "test"
        assert data["description"] == "Test"
        assert data["skip_name_markers"] == ["src"]
        assert ClassificationProfile.from_dict(data) == profile


class TestLoadProfile:
    """Test profile loading."""

    def test_bundled_default_profile(self):
        """Test the packaged default.yaml matches the built-in rules."""
        assert (get_profiles_dir() / "default.yaml").exists()

        profile = load_profile("default")

        builtin = ClassificationProfile(name="default", description=profile.description)
        assert profile == builtin

    def test_load_profile_from_dir(self, tmp_path):
        """Test loading a profile from a custom directory."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()

        (profiles_dir / "compact.yaml").write_text(
            yaml.dump({"name": "compact", "description": "Compact", "max_value_length": 40}),
            encoding='utf-8'
        )

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            profile = load_profile("compact")

            assert profile.name == "compact"
            assert profile.description == "Compact"
            assert profile.max_value_length == 40

    def test_load_profile_not_found(self, tmp_path):
        """Test loading non-existent profile."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            with pytest.raises(FileNotFoundError):
                load_profile("nonexistent")

    def test_load_profile_invalid_yaml(self, tmp_path):
        """Test loading invalid YAML profile."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()

        (profiles_dir / "invalid.yaml").write_text("invalid: yaml: content: [", encoding='utf-8')

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            with pytest.raises(ValueError):
                load_profile("invalid")

    @pytest.mark.parametrize("content", ["", "- just\n- a list\n", "max_value_length: lots\n"])
    def test_load_profile_bad_content(self, tmp_path, content):
        """Test empty, non-mapping and ill-typed profiles are rejected."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()
        (profiles_dir / "bad.yaml").write_text(content, encoding='utf-8')

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            with pytest.raises(ValueError):
                load_profile("bad")

    def test_get_default_profile_without_file(self, tmp_path):
        """Test built-in rules are used when default.yaml is missing."""
        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=tmp_path):
            profile = get_default_profile()

        assert profile.name == "default"
        assert profile.reserved_keys == DEFAULT_RESERVED_KEYS


class TestProfileManager:
    """Test profile manager."""

    def test_set_and_get_profile(self, tmp_path):
        """Test setting and getting profile."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()

        (profiles_dir / "test.yaml").write_text(
            yaml.dump({"name": "test", "description": "Test profile"}),
            encoding='utf-8'
        )

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            profile = set_profile("test")

            assert profile.name == "test"

            current = get_profile()
            assert current.name == "test"

    def test_get_default_profile(self):
        """Test getting default profile."""
        profile = get_profile()

        assert profile.name == "default"

    def test_failed_set_keeps_current(self, tmp_path):
        """Test a missing profile leaves the active profile untouched."""
        active = get_profile()

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=tmp_path):
            with pytest.raises(FileNotFoundError):
                set_profile("missing")

        assert get_profile() is active

    def test_set_profile_instance(self, caplog):
        """Test activating an in-memory profile and logging the switch."""
        caplog.set_level(logging.INFO, logger="style_editor.config.profile_manager")
        inline = ClassificationProfile(name="inline", max_value_length=10)

        assert set_profile(inline) is inline
        assert get_profile() is inline
        assert "'inline' active" in caplog.text

    def test_override_restores_previous(self):
        """Test profile_override swaps the active profile only inside the block."""
        outer = set_profile(ClassificationProfile(name="outer"))
        inner = ClassificationProfile(name="inner")

        with profile_override(inner) as active:
            assert active is inner
            assert get_profile() is inner

        assert get_profile() is outer

    def test_override_restores_on_error(self):
        """Test the previous profile comes back when the block raises."""
        outer = set_profile(ClassificationProfile(name="outer"))

        with pytest.raises(RuntimeError):
            with profile_override(ClassificationProfile(name="inner")):
                raise RuntimeError("boom")

        assert get_profile() is outer

    def test_override_by_name(self, tmp_path):
        """Test overriding with a named profile from the profiles directory."""
        (tmp_path / "compact.yaml").write_text(yaml.dump({"name": "compact"}), encoding='utf-8')

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=tmp_path):
            with profile_override("compact") as active:
                assert get_profile().name == "compact"
                assert active.name == "compact"

        assert get_profile().name == "default"

    def test_override_missing_name_keeps_current(self, tmp_path):
        """Test a missing profile raises before anything is swapped."""
        outer = set_profile(ClassificationProfile(name="outer"))

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=tmp_path):
            with pytest.raises(FileNotFoundError):
                with profile_override("missing"):
                    pass

        assert get_profile() is outer


class TestListProfiles:
    """Test listing available profiles."""

    def test_list_available_profiles(self, tmp_path):
        """Test listing profiles."""
        profiles_dir = tmp_path / "profiles"
        profiles_dir.mkdir()

        (profiles_dir / "default.yaml").write_text("name: default", encoding='utf-8')
        (profiles_dir / "custom.yaml").write_text("name: custom", encoding='utf-8')

        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=profiles_dir):
            profiles = list_available_profiles()

            assert profiles == ["custom", "default"]

    def test_list_without_dir(self, tmp_path):
        """Test listing falls back to the default profile name."""
        with patch('style_editor.config.profile_loader.get_profiles_dir', return_value=tmp_path / "missing"):
            assert list_available_profiles() == ["default"]
