"""HTTP fetching for a single page."""

from __future__ import annotations

import shutil
import tempfile
from pathlib import Path
from typing import Any, Dict, Optional

import certifi
from curl_cffi import requests
from curl_cffi.requests import RequestsError

from .config import settings
from .errors import NetworkError
from .models import FetchResult


def ca_bundle_path() -> Optional[str]:
    """Return certifi's CA bundle, relocated when its path is not ASCII.

    libcurl cannot open non-ASCII paths, which is what a Japanese user profile
    directory usually gives us.
    """
    bundle = Path(certifi.where())
    if str(bundle).isascii():
        return str(bundle)

    relocated = Path(tempfile.gettempdir()) / "xatcoder-cacert.pem"
    try:
        if not relocated.exists() or bundle.stat().st_mtime > relocated.stat().st_mtime:
            shutil.copy2(bundle, relocated)
    except OSError as exc:
        print(f"[Fetcher] Could not relocate CA bundle {bundle}: {exc}")
        return None
    return str(relocated)


CERT_BUNDLE_PATH = ca_bundle_path()


class Fetcher:
    """Fetch one page with a blocking GET.

    The session is injectable so tests can hand in a stub transport. When none
    is given a ``curl_cffi`` session is created and owned by the fetcher.
    """

    def __init__(
        self,
        session: Any = None,
        timeout: float | None = None,
        strict_status: bool | None = None,
        impersonate: str | None = None,
    ) -> None:
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()
        self.timeout = timeout if timeout is not None else settings.timeout
        self.strict_status = settings.strict_status if strict_status is None else strict_status
        self.impersonate = impersonate or settings.impersonate
        self._cert_bundle = CERT_BUNDLE_PATH

    def __enter__(self) -> "Fetcher":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def fetch(self, url: str) -> FetchResult:
        """GET ``url`` and return its body as text."""
        try:
            response = self.session.get(url, **self._request_options())
        except RequestsError as exc:
            raise NetworkError(f"Failed to send request to {url}: {exc}") from exc

        try:
            html = response.text
        except (UnicodeDecodeError, LookupError) as exc:
            raise NetworkError(f"Failed to read response text from {url}: {exc}") from exc

        status = response.status_code
        if status >= 400:
            if self.strict_status:
                raise NetworkError(f"HTTP {status} for {url}")
            print(f"[Fetcher] Warning: HTTP {status} for {url}, using the body anyway")

        if "<html" not in html.lower():
            print(f"[Fetcher] Warning: unusual response, missing <html> tag for {url}")

        return FetchResult(url=response.url or url, html=html, status_code=status)

    def _request_options(self) -> Dict[str, Any]:
        options: Dict[str, Any] = {"timeout": self.timeout}
        if self._cert_bundle:
            options["verify"] = self._cert_bundle
        if self.impersonate:
            options["impersonate"] = self.impersonate
        return options
