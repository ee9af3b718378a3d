"""Built-in data used when the bundled resources cannot be loaded."""

import json

# Two small components so the editor is never empty.
FALLBACK_DOCUMENT = {
    "chatbox": {
        "__comment": "Chat input box styling",
        "background_color": "colors.background.base.level000",
        "text_color": "colors.text.base.level800",
    },
    "avatar": {
        "__comment": "User avatar styling",
        "background_color": "colors.background.brand.primary.normal",
        "text_color": "#FFFFFF",
    },
}

FALLBACK_TOKEN_PALETTE = {
    "colors": {
        "background": {
            "base": {
                "level000": "#FFFFFF",
                "level020": "#F8F9FA",
                "level040": "#F1F3F4",
                "level060": "#E8EAED",
                "level080": "#DADCE0",
                "level100": "#BDC1C6",
            },
            "brand": {
                "primary": {
                    "normal": "#1A73E8",
                    "hover": "#1557B0",
                    "active": "#174EA6",
                },
            },
        },
        "text": {
            "base": {
                "level800": "#202124",
                "level600": "#5F6368",
                "level400": "#9AA0A6",
            },
        },
    },
}


def fallback_document_text() -> str:
    """Fallback document rendered as indented JSON, so snippets work on it too."""
    return json.dumps(FALLBACK_DOCUMENT, indent=2) + "\n"
