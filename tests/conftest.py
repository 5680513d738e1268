"""Shared fixtures."""

from pathlib import Path

import pytest

from presspack.config import reset_settings

SAMPLE_HEADER = """<?php
/**
 * Plugin Name: Sample Plugin
 * Plugin URI: https://example.com/sample
 * Description: A sample plugin for tests.
 * Version: 1.2.3
 * Author: Jane Doe
 * Author URI: https://example.com/jane
 * Text Domain: sample
 * Requires at least: 6.0
 * Requires PHP: 7.4
 */
"""

SOLO_HEADER = """<?php
/*
Plugin Name: Solo
Version: 0.1
Network: true
*/
"""


@pytest.fixture(autouse=True)
def _clean_settings(monkeypatch: pytest.MonkeyPatch):
    """Keep process-wide settings isolated between tests."""
    monkeypatch.delenv("PRESSPACK_PLUGINS_DIR", raising=False)
    monkeypatch.delenv("WP_PLUGIN_DIR", raising=False)
    monkeypatch.delenv("PRESSPACK_VENDOR", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def plugins_dir(tmp_path: Path) -> Path:
    """Create a plugins directory with a few installed plugins."""
    root = tmp_path / "plugins"
    (root / "sample").mkdir(parents=True)
    (root / "sample" / "sample.php").write_text(SAMPLE_HEADER)
    (root / "sample" / "includes.php").write_text("<?php\n// helper\n")
    (root / "solo.php").write_text(SOLO_HEADER)
    (root / "index.php").write_text("<?php\n// Silence is golden.\n")
    (root / "readme.txt").write_text("Plugin Name: Not a plugin\n")
    return root
