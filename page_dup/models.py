"""Data models used throughout the mirroring pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from bs4 import Tag

from .config import GATEWAY_URL_TEMPLATE
from .errors import AssetDownloadError, PageDupError, UploadError


@dataclass
class AssetReference:
    """Asset element discovered in the page and its resolved URL."""

    element: Tag
    absolute_url: str
    attribute: str


@dataclass
class AssetDownload:
    """Outcome of downloading one asset."""

    reference: AssetReference
    path: Optional[Path] = None
    error: Optional[AssetDownloadError] = None

    @property
    def ok(self) -> bool:
        return self.path is not None


@dataclass
class ScrapeResult:
    """Files staged for upload, or the reason the page could not be mirrored."""

    files: List[Path] = field(default_factory=list)
    downloads: List[AssetDownload] = field(default_factory=list)
    error: Optional[PageDupError] = None

    @property
    def failed_downloads(self) -> List[AssetDownload]:
        return [download for download in self.downloads if not download.ok]


@dataclass
class UploadResult:
    """Content identifier of an uploaded directory."""

    cid: Optional[str] = None
    error: Optional[UploadError] = None

    @property
    def ok(self) -> bool:
        return self.cid is not None and self.error is None

    @property
    def gateway_url(self) -> Optional[str]:
        if not self.cid:
            return None
        return GATEWAY_URL_TEMPLATE.format(cid=self.cid)
