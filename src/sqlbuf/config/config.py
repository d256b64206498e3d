"""Configuration loading for named parameter styles."""

import sys
from pathlib import Path
from typing import Dict, Union, Optional, Any

# Use tomllib for Python 3.11+, fallback to tomli for older versions
if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        raise ImportError(
            "Python < 3.11 requires 'tomli' package. " +
            "Install it with: pip install tomli"
        )

from sqlbuf.params import ParamStyle, POSTGRES

from .paths import resolve_config_path

BUILTIN_STYLES: Dict[str, ParamStyle] = {
    "postgres": POSTGRES,
}

_STYLE_KEYS = frozenset({"marker", "prefix"})


def _read_styles(config_file: Path) -> Dict[str, Any]:
    with open(config_file, "rb") as f:
        return tomllib.load(f)


def _build_style(name: str, settings: Any, config_file: Path) -> ParamStyle:
    if not isinstance(settings, dict):
        raise ValueError(f"Style '{name}' in {config_file} must be a table")

    unknown = sorted(set(settings) - _STYLE_KEYS)
    if unknown:
        raise ValueError(
            f"Unknown keys for style '{name}' in {config_file}: {', '.join(unknown)}. " +
            f"Supported keys: {', '.join(sorted(_STYLE_KEYS))}"
        )
    return ParamStyle(**settings)


def load_style(
    name: str,
    path: Optional[Union[str, Path]] = None
) -> ParamStyle:
    """
    Load a named parameter style from styles.toml.

    Built-in styles are always available; a table with the same name in
    the file takes precedence over the built-in definition.

    Args:
        name: Name of the style to load
        path: Optional explicit path to styles.toml file.
              If None, uses SQLBUF_CONFIG_DIR or ~/.sqlbuf/.

    Returns:
        The ParamStyle described by the named table

    Raises:
        FileNotFoundError: If the style is not built-in and styles.toml is missing
        KeyError: If the style exists neither in the file nor as a built-in
        ValueError: If the style table contains unsupported keys

    Example:
        >>> load_style("postgres")
        ParamStyle(marker='?', prefix='$')
    """
    config_file = resolve_config_path(path)

    if not config_file.exists():
        if name in BUILTIN_STYLES:
            return BUILTIN_STYLES[name]
        raise FileNotFoundError(
            f"sqlbuf style file not found at {config_file}. " +
            f"Create a styles.toml file to define the '{name}' style."
        )

    all_styles = _read_styles(config_file)

    if name in all_styles:
        return _build_style(name, all_styles[name], config_file)

    if name in BUILTIN_STYLES:
        return BUILTIN_STYLES[name]

    tables = {key for key, settings in all_styles.items() if isinstance(settings, dict)}
    available = ", ".join(sorted(tables | set(BUILTIN_STYLES)))
    raise KeyError(
        f"Style '{name}' not found in {config_file}. " +
        f"Available styles: {available}"
    )


def list_styles(path: Optional[Union[str, Path]] = None) -> list[str]:
    """
    List all available style names, built-in ones included.

    Args:
        path: Optional explicit path to styles.toml file

    Returns:
        Sorted list of style names

    Example:
        >>> list_styles()
        ['oracle', 'postgres']
    """
    config_file = resolve_config_path(path)
    names = set(BUILTIN_STYLES)

    if config_file.exists():
        names.update(
            name for name, settings in _read_styles(config_file).items()
            if isinstance(settings, dict)
        )

    return sorted(names)
