"""Central configuration for the Style Editor."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def get_app_name() -> str:
    """Get application name."""
    return "Style Editor"


def get_app_version() -> str:
    """Get application version from pyproject.toml."""
    try:
        import tomli
        pyproject_path = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
        with open(pyproject_path, "rb") as f:
            pyproject = tomli.load(f)
            return pyproject.get("project", {}).get("version", "0.1.0")
    except (OSError, ImportError, ValueError) as e:
        logger.debug("Could not read version from pyproject.toml: %s", e)
        return "0.1.0"


def get_resources_dir() -> Path:
    """Get directory holding the bundled JSON resources and profiles."""
    return Path(__file__).resolve().parent.parent / "resources"


def get_source_document_path() -> Path:
    """Get path to the style source document.

    Returns:
        Path from STYLE_EDITOR_SOURCE environment variable, or the bundled
        resources/interface_styles.json
    """
    env_path = os.getenv("STYLE_EDITOR_SOURCE")
    if env_path:
        return Path(env_path)
    return get_resources_dir() / "interface_styles.json"


def get_token_palette_path() -> Path:
    """Get path to the semantic token palette.

    Returns:
        Path from STYLE_EDITOR_PALETTE environment variable, or the bundled
        resources/token_palette.json
    """
    env_path = os.getenv("STYLE_EDITOR_PALETTE")
    if env_path:
        return Path(env_path)
    return get_resources_dir() / "token_palette.json"


def get_profile_name() -> str:
    """Get name of the classification profile (STYLE_EDITOR_PROFILE, default "default")."""
    return os.getenv("STYLE_EDITOR_PROFILE", "default").strip() or "default"


def get_log_level() -> str:
    """Get logging level name.

    Returns:
        STYLE_EDITOR_LOG_LEVEL upper-cased if valid, else "INFO"
    """
    level = os.getenv("STYLE_EDITOR_LOG_LEVEL", "INFO").upper()
    if level not in _LOG_LEVELS:
        logger.warning(f"Invalid log level: {level}, using 'INFO'")
        return "INFO"
    return level
