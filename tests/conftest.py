"""Pytest configuration and shared fixtures for unit tests."""

import pytest

from sqlbuf import Builder


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Point SQLBUF_CONFIG_DIR at an empty directory so user styles never leak in."""
    config_dir = tmp_path / "sqlbuf_config"
    config_dir.mkdir()
    monkeypatch.setenv("SQLBUF_CONFIG_DIR", str(config_dir))
    return config_dir


@pytest.fixture
def styles_file(isolated_config_dir):
    """styles.toml with a few named styles, placed in the active config directory."""
    config_content = """
[oracle]
prefix = ":"

[sqlite]
prefix = "?"

[percent]
marker = "%s"
prefix = "$"
"""
    config_path = isolated_config_dir / "styles.toml"
    config_path.write_text(config_content)
    return config_path


@pytest.fixture
def builder() -> Builder:
    """Empty builder with the default style."""
    return Builder()
