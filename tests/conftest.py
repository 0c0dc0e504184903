from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

import pytest
import requests

from page_dup.errors import UploadError


def make_response(
    url: str,
    status: int,
    body: Union[str, bytes],
    headers: Optional[Dict[str, str]] = None,
) -> requests.Response:
    resp = requests.Response()
    resp.url = url
    resp.status_code = status
    resp.reason = "OK" if status < 400 else "Not Found"
    resp._content = body.encode("utf-8") if isinstance(body, str) else body
    resp.headers.update(headers or {})
    resp.encoding = requests.utils.get_encoding_from_headers(resp.headers)
    return resp


class FakeSession:
    """Stand-in for requests.Session serving canned responses."""

    def __init__(self, routes: Optional[Dict[str, tuple]] = None):
        self.routes = dict(routes or {})
        self.requested: List[str] = []
        self.timeouts: List[Optional[float]] = []

    def get(self, url: str, timeout=None) -> requests.Response:
        self.requested.append(url)
        self.timeouts.append(timeout)
        if url not in self.routes:
            raise requests.ConnectionError(f"no route to {url}")
        status, body, *rest = self.routes[url]
        return make_response(url, status, body, *rest)


class FakeUploader:
    def __init__(self, cid: str = "bafytestcid", fail_step: Optional[str] = None):
        self.cid = cid
        self.fail_step = fail_step
        self.calls: List[tuple] = []

    def _maybe_fail(self, step: str) -> None:
        if self.fail_step == step:
            raise UploadError(step, "boom")

    def login(self, email: str) -> None:
        self.calls.append(("login", email))
        self._maybe_fail("login")

    def use_space(self, did: str) -> None:
        self.calls.append(("use_space", did))
        self._maybe_fail("space selection")

    def upload_directory(self, paths: Sequence[Path]) -> str:
        self.calls.append(("upload", [Path(p).name for p in paths]))
        self._maybe_fail("upload")
        return self.cid


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    path = tmp_path / "assets"
    path.mkdir()
    return path


@pytest.fixture
def fake_uploader() -> FakeUploader:
    return FakeUploader()
