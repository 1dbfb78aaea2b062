"""Pytest configuration and fixtures for wpcheck tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import phpserialize
import pytest


VERSION_PHP_TEMPLATE = """<?php
/**
 * WordPress Version
 *
 * Contains version information for the current WordPress release.
 *
 * @package WordPress
 * @since 1.2.0
 */

/**
 * The WordPress version string.
 *
 * @global string $wp_version
 */
$wp_version = '{version}';

/**
 * Holds the WordPress DB revision, increments when changes are made to the WordPress DB schema.
 *
 * @global int $wp_db_version
 */
$wp_db_version = 56657;

/**
 * Holds the TinyMCE version.
 *
 * @global string $tinymce_version
 */
$tinymce_version = '49110-20201110';

$required_php_version = '7.0.0';
$required_mysql_version = '5.0';
"""


@pytest.fixture
def tmp_workspace(tmp_path: Path) -> Path:
    """Create a temporary workspace directory for tests."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def make_install(tmp_workspace: Path) -> Callable[[str, str], Path]:
    """Factory that creates a fake WordPress install and returns its marker file."""

    def _make(relative_root: str, version: str) -> Path:
        includes = tmp_workspace / relative_root / "wp-includes"
        includes.mkdir(parents=True, exist_ok=True)
        marker = includes / "version.php"
        marker.write_text(VERSION_PHP_TEMPLATE.format(version=version))
        return marker

    return _make


@pytest.fixture
def api_payload() -> Callable[[str], bytes]:
    """Build a PHP-serialized version-check API response."""

    def _payload(current: str = "6.4") -> bytes:
        return phpserialize.dumps({
            "offers": {
                0: {
                    "response": "upgrade",
                    "download": f"https://downloads.wordpress.org/release/wordpress-{current}.zip",
                    "locale": "en_US",
                    "current": current,
                    "version": current,
                    "php_version": "7.0.0",
                    "mysql_version": "5.0",
                },
            },
            "translations": {},
        })

    return _payload
