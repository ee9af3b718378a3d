"""Process-wide active classification profile.

The document parser classifies with the active profile whenever no profile
is passed explicitly. The app selects it once at startup from settings;
``profile_override`` swaps it for the duration of a block.
"""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional, Union

from .profile_loader import ClassificationProfile, get_default_profile, load_profile

logger = logging.getLogger(__name__)

ProfileSpec = Union[str, ClassificationProfile]

_active: Optional[ClassificationProfile] = None


def _resolve(profile: ProfileSpec) -> ClassificationProfile:
    if isinstance(profile, ClassificationProfile):
        return profile
    return load_profile(profile)


def set_profile(profile: ProfileSpec = "default") -> ClassificationProfile:
    """Activate a profile for parses that do not pass one.

    Args:
        profile: Name of a profile in the profiles directory, or an instance

    Returns:
        The now active ClassificationProfile

    Raises:
        FileNotFoundError: If a named profile doesn't exist
        ValueError: If a named profile is invalid

    The active profile is left unchanged when loading fails.
    """
    global _active
    resolved = _resolve(profile)
    previous = _active.name if _active is not None else "built-in default"
    _active = resolved
    logger.info("Classification profile %r active (was %r)", resolved.name, previous)
    return resolved


def get_profile() -> ClassificationProfile:
    """Active profile; the default profile is loaded on first use."""
    global _active
    if _active is None:
        _active = get_default_profile()
    return _active


def reset_profile() -> None:
    global _active
    _active = None


@contextmanager
def profile_override(profile: ProfileSpec) -> Iterator[ClassificationProfile]:
    """Activate a profile inside a with-block and restore the previous one on exit.

    Example:
        with profile_override(ClassificationProfile(name="strict", max_value_length=20)):
            components = parse_document(data)
    """
    global _active
    previous = _active
    resolved = _resolve(profile)
    _active = resolved
    try:
        yield resolved
    finally:
        _active = previous
