"""Profile loader for configurable document classification rules."""

import yaml
from pathlib import Path
from typing import Dict, Any, List
from dataclasses import dataclass, field


DEFAULT_SUBCOMPONENT_MARKERS = [
    "color", "background", "border", "font", "padding", "margin", "width", "height",
]
DEFAULT_STATE_MODIFIERS = [
    "__comment", "hover", "active", "disabled", "focused", "selected", "normal",
]
DEFAULT_COLOR_NAME_MARKERS = ["color", "background", "border"]
DEFAULT_SKIP_NAME_MARKERS = ["src", "data", "image", "logo", "icon"]
DEFAULT_SKIP_ANCESTOR_MARKERS = ["logo_image", "icons"]
DEFAULT_SKIP_VALUE_PREFIXES = ["data:image/"]
DEFAULT_RESERVED_KEYS = ["semantic_tokens"]
DEFAULT_MAX_VALUE_LENGTH = 100


@dataclass
class ClassificationProfile:
    """Rules deciding which JSON members become components, subcomponents and keys."""
    name: str
    description: str = ""
    reserved_keys: List[str] = field(default_factory=lambda: list(DEFAULT_RESERVED_KEYS))
    subcomponent_markers: List[str] = field(default_factory=lambda: list(DEFAULT_SUBCOMPONENT_MARKERS))
    state_modifiers: List[str] = field(default_factory=lambda: list(DEFAULT_STATE_MODIFIERS))
    color_name_markers: List[str] = field(default_factory=lambda: list(DEFAULT_COLOR_NAME_MARKERS))
    skip_name_markers: List[str] = field(default_factory=lambda: list(DEFAULT_SKIP_NAME_MARKERS))
    skip_ancestor_markers: List[str] = field(default_factory=lambda: list(DEFAULT_SKIP_ANCESTOR_MARKERS))
    skip_value_prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_SKIP_VALUE_PREFIXES))
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClassificationProfile':
        """Create ClassificationProfile from dictionary; missing sections keep defaults."""
        defaults = cls(name=data.get('name', 'default'))
        return cls(
            name=defaults.name,
            description=data.get('description', ''),
            reserved_keys=list(data.get('reserved_keys', defaults.reserved_keys)),
            subcomponent_markers=list(data.get('subcomponent_markers', defaults.subcomponent_markers)),
            state_modifiers=list(data.get('state_modifiers', defaults.state_modifiers)),
            color_name_markers=list(data.get('color_name_markers', defaults.color_name_markers)),
            skip_name_markers=list(data.get('skip_name_markers', defaults.skip_name_markers)),
            skip_ancestor_markers=list(data.get('skip_ancestor_markers', defaults.skip_ancestor_markers)),
            skip_value_prefixes=list(data.get('skip_value_prefixes', defaults.skip_value_prefixes)),
            max_value_length=int(data.get('max_value_length', defaults.max_value_length)),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'reserved_keys': self.reserved_keys,
            'subcomponent_markers': self.subcomponent_markers,
            'state_modifiers': self.state_modifiers,
            'color_name_markers': self.color_name_markers,
            'skip_name_markers': self.skip_name_markers,
            'skip_ancestor_markers': self.skip_ancestor_markers,
            'skip_value_prefixes': self.skip_value_prefixes,
            'max_value_length': self.max_value_length,
        }


def get_profiles_dir() -> Path:
    """Get directory containing profile YAML files.

    Returns:
        Path to profiles directory
    """
    # style_editor/config/profile_loader.py -> style_editor/resources/profiles
    package_root = Path(__file__).resolve().parent.parent
    return package_root / "resources" / "profiles"


def load_profile(profile_name: str = "default") -> ClassificationProfile:
    """Load a classification profile.

    Args:
        profile_name: Name of profile to load (without .yaml extension)

    Returns:
        ClassificationProfile object

    Raises:
        FileNotFoundError: If profile file doesn't exist
        ValueError: If profile file is invalid
    """
    profiles_dir = get_profiles_dir()
    profile_path = profiles_dir / f"{profile_name}.yaml"

    if not profile_path.exists():
        raise FileNotFoundError(f"Profile not found: {profile_name} (expected at {profile_path})")

    try:
        with open(profile_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in profile {profile_name}: {e}")
    except OSError as e:
        raise ValueError(f"Error loading profile {profile_name}: {e}")

    if not data:
        raise ValueError(f"Profile file is empty: {profile_path}")
    if not isinstance(data, dict):
        raise ValueError(f"Profile {profile_name} must be a mapping, got {type(data).__name__}")

    try:
        return ClassificationProfile.from_dict(data)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Error loading profile {profile_name}: {e}")


def list_available_profiles() -> list[str]:
    """List all available profile names.

    Returns:
        List of profile names (without .yaml extension)
    """
    profiles_dir = get_profiles_dir()

    if not profiles_dir.exists():
        return ["default"]

    profiles = [profile_file.stem for profile_file in profiles_dir.glob("*.yaml")]

    return sorted(profiles) if profiles else ["default"]


def get_default_profile() -> ClassificationProfile:
    """Get default profile (always available).

    Returns:
        Default ClassificationProfile
    """
    try:
        return load_profile("default")
    except FileNotFoundError:
        # Fallback: built-in rules
        return ClassificationProfile(
            name="default",
            description="Built-in classification rules",
        )
