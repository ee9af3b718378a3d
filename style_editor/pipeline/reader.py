"""Reading the style document and token palette from disk."""

import copy
import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..config.profile_loader import ClassificationProfile
from ..models.style_document import StyleDocument
from .document_parser import parse_document
from .errors import DocumentLoadError, TokenPaletteLoadError
from .fallbacks import FALLBACK_TOKEN_PALETTE, fallback_document_text
from .json_scanner import scan_json
from .token_palette import TokenPalette

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def parse_style_text(
    text: str,
    source_path: Optional[str] = None,
    profile: Optional[ClassificationProfile] = None,
) -> StyleDocument:
    """Scan and parse style document text.

    Raises:
        DocumentLoadError: If text is not valid JSON, is nested too deeply to
            scan, or its root is not an object
    """
    try:
        scanned = scan_json(text)
        components = parse_document(scanned.data, scanned.index, profile)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(
            f"Invalid JSON in style document: {e.msg} (line {e.lineno}, column {e.colno})",
            line=e.lineno,
            column=e.colno,
        ) from e
    except RecursionError as e:
        raise DocumentLoadError("Style document is nested too deeply to parse") from e

    return StyleDocument(components=components, source_text=text, source_path=source_path)


def read_style_document(
    filepath: PathLike,
    profile: Optional[ClassificationProfile] = None,
) -> StyleDocument:
    """Read a style document file and build its component tree.

    Args:
        filepath: Path to the JSON style document
        profile: Classification rules (active profile if None)

    Returns:
        StyleDocument with line numbers taken from the file's own layout

    Raises:
        DocumentLoadError: If the file is missing, unreadable, not JSON or not an object
    """
    path = Path(filepath)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise DocumentLoadError(f"Cannot read style document {path}: {e}") from e

    return parse_style_text(text, source_path=str(path), profile=profile)


def load_style_document(
    filepath: PathLike,
    profile: Optional[ClassificationProfile] = None,
) -> StyleDocument:
    """Read a style document, falling back to the built-in sample on any load error."""
    try:
        document = read_style_document(filepath, profile)
    except DocumentLoadError as e:
        logger.warning("Using fallback style document: %s", e)
        return parse_style_text(fallback_document_text(), profile=profile)

    logger.info(f"Loaded {len(document.components)} components from {filepath}")
    return document


def read_token_palette(filepath: PathLike) -> TokenPalette:
    """Read the semantic token palette.

    Raises:
        TokenPaletteLoadError: If the file is missing, unreadable, not JSON or not an object
    """
    path = Path(filepath)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise TokenPaletteLoadError(f"Cannot read token palette {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise TokenPaletteLoadError(f"Invalid JSON in token palette {path}: {e}") from e

    if not isinstance(data, dict):
        raise TokenPaletteLoadError(
            f"Token palette root must be a JSON object, got {type(data).__name__}"
        )
    return TokenPalette(data)


def load_token_palette(filepath: PathLike) -> TokenPalette:
    """Read the token palette, falling back to a small built-in palette on any load error."""
    try:
        palette = read_token_palette(filepath)
    except TokenPaletteLoadError as e:
        logger.warning("Using fallback token palette: %s", e)
        return TokenPalette(copy.deepcopy(FALLBACK_TOKEN_PALETTE))

    logger.info(f"Token palette loaded with {len(palette)} top-level keys")
    return palette
