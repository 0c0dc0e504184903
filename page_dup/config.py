"""Configuration objects and constants for the page mirror."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

DEFAULT_STAGING_DIR = Path("assets")
INDEX_FILENAME = "index.html"
ASSET_LINK_PREFIX = "assets"
GATEWAY_URL_TEMPLATE = "https://{cid}.ipfs.dweb.link"
DEFAULT_USER_AGENT = "page-dup/0.1 (+https://web3.storage)"


def _default_w3_binary() -> str:
    return os.getenv("W3_BINARY") or "w3"


@dataclass
class MirrorConfig:
    """Settings that control fetching, staging and uploading a page."""

    staging_dir: Path = DEFAULT_STAGING_DIR
    request_timeout: Optional[float] = None
    user_agent: str = DEFAULT_USER_AGENT
    w3_binary: str = field(default_factory=_default_w3_binary)
