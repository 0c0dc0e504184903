"""Asset discovery, downloading and staging directory management."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urljoin

import requests

from .config import ASSET_LINK_PREFIX
from .document import HtmlDocument
from .errors import AssetDownloadError
from .fetcher import get
from .models import AssetDownload, AssetReference
from .utils import url_basename

logger = logging.getLogger("page_dup")

ASSET_SELECTOR = 'link[rel="stylesheet"], script[src], img[src]'


def _reference_attribute(tag_name: str) -> str:
    return "href" if tag_name == "link" else "src"


def extract_assets(document: HtmlDocument, source_url: str) -> List[AssetReference]:
    """Locate stylesheet, script and image references in document order."""
    references: List[AssetReference] = []
    for element in document.select(ASSET_SELECTOR):
        attribute = _reference_attribute(element.name)
        value = document.get_attribute(element, attribute)
        if not value or not value.strip():
            continue
        try:
            absolute_url = urljoin(source_url, value.strip())
        except ValueError as exc:
            logger.warning("Skipping unresolvable asset reference %r: %s", value, exc)
            continue
        references.append(AssetReference(element, absolute_url, attribute))
    logger.debug("Found %d asset reference(s) in %s", len(references), source_url)
    return references


def ensure_directory_exists(directory: Path) -> None:
    directory.mkdir(parents=True, exist_ok=True)


def clear_assets(staging_dir: Path) -> bool:
    """Recreate the staging directory empty so stale files are never uploaded."""
    try:
        if staging_dir.exists():
            shutil.rmtree(staging_dir)
        staging_dir.mkdir(parents=True)
    except OSError as exc:
        logger.error("Error clearing assets in %s: %s", staging_dir, exc)
        return False
    return True


def _download_asset(
    reference: AssetReference,
    staging_dir: Path,
    session: requests.Session,
    timeout: Optional[float],
) -> Path:
    url = reference.absolute_url
    filename = url_basename(url)
    if not filename:
        raise AssetDownloadError(url, "URL path has no file name")
    try:
        resp = get(session, url, timeout)
    except requests.RequestException as exc:
        raise AssetDownloadError(url, str(exc)) from exc

    destination = staging_dir / filename
    try:
        ensure_directory_exists(destination.parent)
        destination.write_bytes(resp.content)
    except OSError as exc:
        raise AssetDownloadError(url, f"could not write {destination}: {exc}") from exc
    return destination


def download_assets(
    references: Sequence[AssetReference],
    document: HtmlDocument,
    staging_dir: Path,
    session: requests.Session,
    timeout: Optional[float] = None,
) -> Tuple[HtmlDocument, List[AssetDownload]]:
    """Download each asset in turn and point its element at the local copy.

    Failed assets are logged and keep their original reference.
    """
    downloads: List[AssetDownload] = []
    for reference in references:
        logger.info("Fetching: %s", reference.absolute_url)
        try:
            destination = _download_asset(reference, staging_dir, session, timeout)
        except AssetDownloadError as exc:
            logger.warning("%s", exc)
            downloads.append(AssetDownload(reference, error=exc))
            continue

        document.set_attribute(
            reference.element,
            reference.attribute,
            f"{ASSET_LINK_PREFIX}/{destination.name}",
        )
        downloads.append(AssetDownload(reference, path=destination))
    return document, downloads


def downloaded_paths(downloads: Sequence[AssetDownload]) -> List[Path]:
    return [download.path for download in downloads if download.path is not None]
