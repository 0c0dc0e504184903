"""HTTP retrieval of pages and asset bytes."""

from __future__ import annotations

import logging
from typing import Optional

import requests

from .config import DEFAULT_USER_AGENT
from .errors import PageFetchError

logger = logging.getLogger("page_dup")


def create_session(user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Build the single HTTP session shared by one mirroring run."""
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session


def get(
    session: requests.Session, url: str, timeout: Optional[float] = None
) -> requests.Response:
    """Issue a GET and raise for non-success statuses."""
    resp = session.get(url, timeout=timeout)
    resp.raise_for_status()
    return resp


def fetch_html(
    url: str, session: requests.Session, timeout: Optional[float] = None
) -> str:
    """Return the body of ``url`` as text, raising PageFetchError on failure."""
    logger.info("Loading %s", url)
    try:
        resp = get(session, url, timeout)
    except requests.RequestException as exc:
        raise PageFetchError(url, str(exc)) from exc
    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in resp.headers.get("Content-Type", "").lower():
        resp.encoding = resp.apparent_encoding or "utf-8"
    return resp.text
