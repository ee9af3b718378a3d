"""Top-level views of the Style Editor."""
