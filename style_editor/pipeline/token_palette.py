"""Semantic token palette: resolves dotted token paths to literal values."""

from __future__ import annotations

from typing import Any, Mapping, Optional


class TokenPalette:
    """Read-only nested mapping addressed by dotted paths.

    Example:
        >>> palette = TokenPalette({"colors": {"background": {"base": {"level000": "#FFFFFF"}}}})
        >>> palette.resolve("colors.background.base.level000")
        '#FFFFFF'
    """

    def __init__(self, tokens: Optional[Mapping[str, Any]] = None):
        self._tokens: Mapping[str, Any] = tokens or {}

    @property
    def tokens(self) -> Mapping[str, Any]:
        return self._tokens

    def __len__(self) -> int:
        return len(self._tokens)

    def resolve(self, dotted_path: str) -> Optional[str]:
        """Walk the palette one segment at a time.

        Returns:
            The string leaf at the path, or None when a segment is missing,
            the path ends on a mapping, or the leaf is not a string.
        """
        current: Any = self._tokens
        for segment in dotted_path.split("."):
            if not isinstance(current, Mapping) or segment not in current:
                return None
            current = current[segment]

        if isinstance(current, str):
            return current
        return None
