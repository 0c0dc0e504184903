"""Command-line entry point for duplicating a page to web3.storage."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .assets import clear_assets
from .config import DEFAULT_STAGING_DIR, MirrorConfig
from .mirror import scrape_page
from .storage import W3CliUploader, upload_to_web3_storage

logger = logging.getLogger("page_dup.cli")

_REQUIRED_ARGUMENTS = (
    ("email", "EMAIL", "Please provide your email address"),
    ("space", "SPACE", "Please provide a space key for web3.storage"),
    ("url", "URL", "Please provide the URL of a page to duplicate"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="page-dup",
        description="Copy a web page and its assets, then publish it on web3.storage.",
    )
    parser.add_argument(
        "email", nargs="?", metavar="EMAIL", help="Email address of the web3.storage account"
    )
    parser.add_argument(
        "space", nargs="?", metavar="SPACE", help="Space key (did:key) to upload into"
    )
    parser.add_argument("url", nargs="?", metavar="URL", help="URL of the page to duplicate")
    parser.add_argument(
        "--staging-dir",
        default=DEFAULT_STAGING_DIR,
        type=Path,
        help="Directory where the page and its assets are staged (default: ./assets)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Seconds to wait for each HTTP response (default: no timeout)",
    )
    parser.add_argument(
        "--w3",
        dest="w3_binary",
        default=None,
        help="Path to the w3 command-line client",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    for dest, metavar, message in _REQUIRED_ARGUMENTS:
        if not getattr(args, dest):
            parser.print_usage(sys.stderr)
            parser.exit(1, f"{parser.prog}: error: {message} (missing {metavar}).\n")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    config = MirrorConfig(staging_dir=args.staging_dir, request_timeout=args.timeout)
    if args.w3_binary:
        config.w3_binary = args.w3_binary

    overall_start = time.perf_counter()
    clear_assets(config.staging_dir)
    result = scrape_page(args.url, config)
    if not result.files:
        logger.error("Nothing to upload for %s", args.url)
        return

    upload = upload_to_web3_storage(
        result.files,
        args.email,
        args.space,
        uploader=W3CliUploader(config.w3_binary),
    )
    logger.debug("Finished in %.2fs", time.perf_counter() - overall_start)
    if upload.ok:
        logger.info("Access the copied page at: %s", upload.gateway_url)
        print(upload.gateway_url)


if __name__ == "__main__":
    main()
