"""Checker configuration for wpcheck runs."""

from __future__ import annotations

from dataclasses import dataclass, field

# WordPress.org version-check API (PHP-serialized response)
WP_API_URL = "http://api.wordpress.org/core/version-check/1.6/"

# Marker file that identifies an installation, relative to its root
WP_VERSION_SUFFIX = "/wp-includes/version.php"

# Variable assigned the release string inside the marker file
WP_VERSION_VARIABLE = "wp_version"

PLATFORM_NAME = "WordPress"

# Timeouts
HTTP_TIMEOUT = 10.0  # seconds


@dataclass(frozen=True)
class CheckerConfig:
    """Settings for a single scan-and-compare run."""

    api_url: str = WP_API_URL
    marker_suffix: str = WP_VERSION_SUFFIX
    version_variable: str = WP_VERSION_VARIABLE
    platform_name: str = PLATFORM_NAME
    timeout: float = HTTP_TIMEOUT
    excludes: tuple[str, ...] = field(default_factory=tuple)


DEFAULT_CONFIG = CheckerConfig()
