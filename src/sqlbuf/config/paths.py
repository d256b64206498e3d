"""Path resolution for sqlbuf configuration files."""

import os
from pathlib import Path
from typing import Optional, Union

STYLES_FILENAME = "styles.toml"


def get_config_dir() -> Path:
    """
    Get the configuration directory for sqlbuf.
    
    Priority order:
    1. SQLBUF_CONFIG_DIR environment variable (override)
    2. ~/.sqlbuf/ (dotfile directory in user home)
    
    The directory is not created; a missing directory simply means
    only the built-in styles are available.
    
    Returns:
        Path: Configuration directory path
    """
    env_config_dir = os.getenv("SQLBUF_CONFIG_DIR")
    if env_config_dir:
        return Path(env_config_dir)
    
    return Path.home() / ".sqlbuf"


def get_default_config_path() -> Path:
    """
    Get the path to the styles.toml configuration file.
    
    The environment is consulted on every call so an override set after
    import still takes effect.
    
    Returns:
        Path: The path to styles.toml (which may not exist)
    """
    return get_config_dir() / STYLES_FILENAME


def resolve_config_path(path: Optional[Union[str, Path]] = None) -> Path:
    """
    Resolve the configuration file path.
    
    Args:
        path: Optional explicit path to styles.toml file.
              If None, uses default resolution logic.
    
    Returns:
        Path: Resolved path object
    """
    if path:
        return Path(path)
    return get_default_config_path()
