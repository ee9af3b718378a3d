"""Configuration package."""

from .settings import (
    get_app_name,
    get_app_version,
    get_log_level,
    get_profile_name,
    get_resources_dir,
    get_source_document_path,
    get_token_palette_path,
)

__all__ = [
    'get_app_name',
    'get_app_version',
    'get_log_level',
    'get_profile_name',
    'get_resources_dir',
    'get_source_document_path',
    'get_token_palette_path',
]
