"""Upload staged files to web3.storage through the ``w3`` command-line client."""

from __future__ import annotations

import json
import logging
import re
import subprocess
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from .errors import UploadError
from .models import UploadResult
from .utils import space_did

logger = logging.getLogger("page_dup.storage")

_CID_PATTERN = re.compile(r"\b(baf[a-z2-7]{50,})\b")


class Uploader(Protocol):
    """Capability needed to publish a directory to the storage network."""

    def login(self, email: str) -> None: ...

    def use_space(self, did: str) -> None: ...

    def upload_directory(self, paths: Sequence[Path]) -> str: ...


def parse_upload_output(output: str) -> Optional[str]:
    """Extract the root CID from ``w3 up --json`` output."""
    for line in reversed(output.splitlines()):
        line = line.strip()
        if not line.startswith("{"):
            continue
        try:
            payload = json.loads(line)
        except ValueError:
            continue
        root = payload.get("root") if isinstance(payload, dict) else None
        if isinstance(root, dict) and root.get("/"):
            return root["/"]
        if isinstance(root, str) and root:
            return root
    # older clients print a gateway link instead of JSON
    match = _CID_PATTERN.search(output)
    if match:
        return match.group(1)
    return None


class W3CliUploader:
    """Drive the official web3.storage CLI, one subprocess per step."""

    def __init__(self, binary: str = "w3") -> None:
        self.binary = binary

    def _run(self, step: str, *args: str) -> str:
        cmd = [self.binary, *args]
        logger.debug("Running %s", " ".join(cmd))
        try:
            res = subprocess.run(cmd, capture_output=True, text=True, check=True)
        except FileNotFoundError as exc:
            raise UploadError(step, f"{self.binary} executable not found") from exc
        except OSError as exc:
            raise UploadError(step, f"could not run {self.binary}: {exc}") from exc
        except subprocess.CalledProcessError as exc:
            detail = (exc.stderr or exc.stdout or "").strip()
            raise UploadError(
                step, detail or f"{self.binary} exited with status {exc.returncode}"
            ) from exc
        return res.stdout or ""

    def login(self, email: str) -> None:
        logger.info("Logging in as %s (confirm the email to continue)", email)
        self._run("login", "login", email)

    def use_space(self, did: str) -> None:
        self._run("space selection", "space", "use", did)

    def upload_directory(self, paths: Sequence[Path]) -> str:
        output = self._run("upload", "up", "--json", *[str(path) for path in paths])
        cid = parse_upload_output(output)
        if not cid:
            raise UploadError("upload", "no content identifier in client output")
        return cid


def upload_to_web3_storage(
    files: Sequence[Path],
    email: str,
    key: str,
    uploader: Optional[Uploader] = None,
) -> UploadResult:
    """Upload ``files`` as one directory into the space identified by ``key``."""
    uploader = uploader or W3CliUploader()
    paths: List[Path] = [Path(path) for path in files]
    try:
        missing = [str(path) for path in paths if not path.is_file()]
        if missing:
            raise UploadError("file resolution", "missing " + ", ".join(missing))
        uploader.login(email)
        uploader.use_space(space_did(key))
        cid = uploader.upload_directory(paths)
    except UploadError as exc:
        logger.error("Error uploading to web3.storage: %s", exc)
        return UploadResult(error=exc)
    logger.info("Uploaded directory CID: %s", cid)
    return UploadResult(cid=cid)
