"""Utility helpers for URL and path handling."""

from __future__ import annotations

import posixpath
from urllib.parse import urlparse

DID_KEY_PREFIX = "did:key:"


def url_basename(url: str) -> str:
    """Return the final segment of the URL path, ignoring query and fragment."""
    return posixpath.basename(urlparse(url).path)


def space_did(key: str) -> str:
    """Expand a bare space key into a did:key DID."""
    key = key.strip()
    if key.startswith(DID_KEY_PREFIX):
        return key
    return DID_KEY_PREFIX + key
