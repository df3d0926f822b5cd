"""GitHub API operations: paginated listing of an organisation's clone URLs."""

from __future__ import annotations

import json
import re
import urllib.error
import urllib.request
from datetime import datetime
from typing import Mapping, Protocol

from .constants import API_BASE, GITHUB_API_ACCEPT, HTTP_TIMEOUT_SEC, PER_PAGE, USER_AGENT
from .errors import RateLimitExhausted, TransportError
from .types import HttpResponse

_LINK_RE = re.compile(r'<([^>]+)>\s*;\s*rel="?([^",;]+)"?')


class HttpTransport(Protocol):
    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse: ...


class UrllibTransport:
    """Blocking GET over urllib. HTTP error statuses come back as responses, not exceptions."""

    def __init__(self, timeout: float = HTTP_TIMEOUT_SEC) -> None:
        self.timeout = timeout

    def get(self, url: str, headers: Mapping[str, str]) -> HttpResponse:
        req = urllib.request.Request(url, headers=dict(headers), method="GET")
        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as resp:
                return HttpResponse(resp.getcode(), dict(resp.headers.items()), resp.read())
        except urllib.error.HTTPError as e:
            # rate-limit exhaustion arrives as a 403 whose headers we still need
            return HttpResponse(e.code, dict(e.headers.items()) if e.headers else {}, e.read())
        except (urllib.error.URLError, OSError) as e:
            raise TransportError(f"Request failed: {url}: {e}") from e


def next_page_url(link_header: str | None) -> str | None:
    """Return the rel="next" target of a Link header, if any."""
    if not link_header:
        return None
    for part in link_header.split(","):
        m = _LINK_RE.search(part)
        if m and "next" in m.group(2).split():
            return m.group(1)
    return None


def parse_reset(value: str | None) -> datetime | None:
    if value and value.strip().isdigit():
        return datetime.fromtimestamp(int(value.strip()))
    return None


class GitHubClient:
    def __init__(
        self,
        token: str | None = None,
        transport: HttpTransport | None = None,
        api_base: str = API_BASE,
    ) -> None:
        self.token = token
        self.transport = transport or UrllibTransport()
        self.api_base = api_base.rstrip("/")

    # ---------- low-level HTTP ----------
    def _headers(self) -> dict[str, str]:
        headers = {"Accept": GITHUB_API_ACCEPT, "User-Agent": USER_AGENT}
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _get_page(self, url: str) -> HttpResponse:
        resp = self.transport.get(url, self._headers())
        if (resp.header("X-RateLimit-Remaining") or "").strip() == "0":
            raise RateLimitExhausted(parse_reset(resp.header("X-RateLimit-Reset")))
        if resp.status >= 400:
            snippet = resp.body[:200].decode("utf-8", "replace")
            raise TransportError(f"GitHub API error {resp.status} for {url}: {snippet}", resp.status)
        return resp

    # ---------- public API ----------
    def org_repos_url(self, org: str) -> str:
        return f"{self.api_base}/orgs/{org}/repos?per_page={PER_PAGE}"

    def list_clone_urls(self, org: str) -> list[str]:
        """Follow rel="next" links and collect every clone_url, in page order.

        Raises:
            RateLimitExhausted: a response reported zero remaining requests
            TransportError: a request failed or a page was not a JSON list
        """
        urls: list[str] = []
        url: str | None = self.org_repos_url(org)
        while url:
            resp = self._get_page(url)
            try:
                data = json.loads(resp.body.decode("utf-8"))
            except (UnicodeDecodeError, json.JSONDecodeError) as e:
                raise TransportError(f"Failed to parse JSON from {url}: {e}") from e
            if not isinstance(data, list):
                raise TransportError(f"Unexpected response from {url}: expected a list of repositories")
            for r in data:
                clone_url = r.get("clone_url") if isinstance(r, dict) else None
                if clone_url:
                    urls.append(clone_url)
            url = next_page_url(resp.header("Link"))
        return urls
