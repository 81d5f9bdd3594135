"""Load the bytes of a Bible file from disk or over HTTP."""

import logging
from pathlib import Path

import requests

from .errors import SourceUnavailable

log = logging.getLogger(__name__)


# =============================================================================
# Configuration
# =============================================================================

REQUEST_TIMEOUT = 30
URL_SCHEMES = ("http://", "https://")


def is_url(location: str) -> bool:
    return location.lower().startswith(URL_SCHEMES)


def fetch_source(url: str, timeout: float = REQUEST_TIMEOUT) -> bytes:
    """Download a Bible file. Raw bytes are returned so the XML prolog decides the encoding."""
    log.debug("Downloading %s", url)
    try:
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
    except requests.RequestException as e:
        raise SourceUnavailable(url, str(e)) from e
    return response.content


def read_source(location: str) -> bytes:
    """
    Read a Bible file.

    Args:
        location: A filesystem path or an http(s) URL

    Returns:
        Raw file contents

    Raises:
        SourceUnavailable: if the file cannot be read or downloaded
    """
    if is_url(location):
        return fetch_source(location)

    path = Path(location)
    try:
        return path.read_bytes()
    except OSError as e:
        raise SourceUnavailable(location, e.strerror or str(e)) from e
