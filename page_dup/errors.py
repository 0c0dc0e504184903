"""Exceptions raised by the mirroring pipeline."""

from __future__ import annotations


class PageDupError(Exception):
    """Base class for pipeline failures."""


class PageFetchError(PageDupError):
    """The target page could not be retrieved."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch {url}: {reason}")
        self.url = url
        self.reason = reason


class AssetDownloadError(PageDupError):
    """A single asset could not be downloaded or written."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to download asset {url}: {reason}")
        self.url = url
        self.reason = reason


class UploadError(PageDupError):
    """Login, space selection or upload to the storage network failed."""

    def __init__(self, step: str, reason: str) -> None:
        super().__init__(f"Upload failed during {step}: {reason}")
        self.step = step
        self.reason = reason


class PageWriteError(PageDupError):
    """The rewritten page could not be written to the staging directory."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Failed to write {path}: {reason}")
        self.path = path
        self.reason = reason
