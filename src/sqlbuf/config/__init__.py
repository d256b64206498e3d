"""Configuration module exports."""

from .config import load_style, list_styles, BUILTIN_STYLES
from .paths import resolve_config_path, get_default_config_path, get_config_dir

__all__ = [
    "load_style",
    "list_styles",
    "BUILTIN_STYLES",
    "resolve_config_path",
    "get_default_config_path",
    "get_config_dir",
]
