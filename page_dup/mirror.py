"""High-level orchestration for mirroring a page into the staging directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import requests

from .assets import (
    download_assets,
    downloaded_paths,
    ensure_directory_exists,
    extract_assets,
)
from .config import INDEX_FILENAME, MirrorConfig
from .document import HtmlDocument
from .errors import PageFetchError, PageWriteError
from .fetcher import create_session, fetch_html
from .models import ScrapeResult

logger = logging.getLogger("page_dup")


def write_page(document: HtmlDocument, staging_dir: Path) -> Path:
    """Serialize the rewritten document to index.html, replacing any old copy."""
    output_path = staging_dir / INDEX_FILENAME
    try:
        ensure_directory_exists(staging_dir)
        output_path.write_text(document.serialize(), encoding="utf-8")
    except OSError as exc:
        raise PageWriteError(str(output_path), str(exc)) from exc
    logger.info("Saved page to %s", output_path)
    return output_path


def scrape_page(
    url: str,
    config: MirrorConfig,
    session: Optional[requests.Session] = None,
) -> ScrapeResult:
    """Fetch ``url``, stage its assets and write the rewritten page.

    On success ``files`` holds index.html followed by every downloaded
    asset. If the page cannot be fetched or written the result carries
    the error and no files.
    """
    session = session or create_session(config.user_agent)
    try:
        html = fetch_html(url, session, config.request_timeout)
    except PageFetchError as exc:
        logger.error("Error scraping the page: %s", exc)
        return ScrapeResult(error=exc)

    document = HtmlDocument.parse(html)
    references = extract_assets(document, url)
    document, downloads = download_assets(
        references,
        document,
        config.staging_dir,
        session,
        config.request_timeout,
    )

    try:
        index_path = write_page(document, config.staging_dir)
    except PageWriteError as exc:
        logger.error("Error scraping the page: %s", exc)
        return ScrapeResult(downloads=downloads, error=exc)

    asset_paths = downloaded_paths(downloads)
    logger.info(
        "Staged %d of %d asset(s) for %s",
        len(asset_paths),
        len(references),
        url,
    )
    return ScrapeResult(files=[index_path, *asset_paths], downloads=downloads)
