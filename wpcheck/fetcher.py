"""Fetch the latest published WordPress version from WordPress.org."""

from __future__ import annotations

import json
import logging
from typing import Any

import httpx
import phpserialize

from wpcheck.config import DEFAULT_CONFIG, CheckerConfig
from wpcheck.errors import NetworkError, ParseError

logger = logging.getLogger(__name__)


def _decode_payload(body: bytes) -> Any:
    """Decode the API body.

    The 1.6 endpoint answers with a PHP-serialized array, the 1.7 endpoint
    with JSON. Both are accepted.
    """
    stripped = body.lstrip()
    if stripped.startswith(b"{"):
        try:
            return json.loads(stripped)
        except ValueError as e:
            raise ParseError(f"Invalid JSON in version API response: {e}") from e

    try:
        return phpserialize.loads(body, decode_strings=True)
    except (ValueError, EOFError, TypeError) as e:
        raise ParseError(f"Invalid serialized data in version API response: {e}") from e


def _first_offer(offers: Any) -> Any:
    """Return offers[0] for a PHP array (dict keyed by int) or a JSON list."""
    if isinstance(offers, dict):
        return offers.get(0)
    if isinstance(offers, list) and offers:
        return offers[0]
    return None


def _extract_current(payload: Any) -> str:
    """Pull offers[0].current out of a decoded payload."""
    if not isinstance(payload, dict):
        raise ParseError("Version API response is not an object")

    offer = _first_offer(payload.get("offers"))
    if not isinstance(offer, dict):
        raise ParseError("Version API response has no offers")

    current = offer.get("current")
    if not isinstance(current, str) or not current:
        raise ParseError("Version API response has no current version")
    return current


def fetch_latest_version(
    config: CheckerConfig = DEFAULT_CONFIG,
    client: httpx.Client | None = None,
) -> str:
    """Fetch the latest version string with a single GET request.

    Args:
        config: Checker settings (API URL and timeout)
        client: Optional preconfigured httpx client, closed by the caller

    Returns:
        Non-empty version string from offers[0].current

    Raises:
        NetworkError: On connection failure, timeout or HTTP status >= 400
        ParseError: If the body is malformed or lacks the version field
    """
    logger.info(f"Fetching latest version from {config.api_url}")

    try:
        if client is None:
            with httpx.Client(timeout=config.timeout, follow_redirects=True) as own_client:
                response = own_client.get(config.api_url)
                response.raise_for_status()
        else:
            response = client.get(config.api_url, follow_redirects=True)
            response.raise_for_status()

    except httpx.TimeoutException as e:
        logger.error(f"Version API request timed out: {e}")
        raise NetworkError(f"Request to {config.api_url} timed out") from e

    except httpx.HTTPStatusError as e:
        logger.error(f"Version API HTTP error: {e}")
        raise NetworkError(f"Version API returned error: {e.response.status_code}") from e

    except httpx.HTTPError as e:
        logger.error(f"Failed to connect to version API: {e}")
        raise NetworkError(f"Version API unavailable: {e}") from e

    version = _extract_current(_decode_payload(response.content))
    logger.info(f"Latest version reported by API: {version}")
    return version
