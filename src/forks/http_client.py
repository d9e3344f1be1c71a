"""HTTP helpers and page-number pagination for the GitHub REST API."""

from __future__ import annotations

import os
import time
from typing import Any, Dict, Iterator, List, Optional
from urllib.parse import urlencode

import requests

from .config import BACKOFF_BASE_SEC, MAX_RETRIES, REQUEST_TIMEOUT, USER_AGENT

SESSION = requests.Session()
SESSION.headers.update(
    {
        "Accept": "application/vnd.github.v3+json",
        "User-Agent": USER_AGENT,
    }
)

TRANSIENT_STATUSES = {502, 503, 504}


class ApiRequestFailed(RuntimeError):
    """A page request came back with a non-success HTTP status."""

    def __init__(self, status: int, url: str, message: str = "") -> None:
        self.status = status
        self.url = url
        self.message = message
        super().__init__(f"HTTP {status} for {url}" + (f" :: {message}" if message else ""))


class DecodeFailure(RuntimeError):
    """A successful response body was not the JSON array the API promises."""

    def __init__(self, url: str, detail: str) -> None:
        self.url = url
        self.detail = detail
        super().__init__(f"could not decode response from {url}: {detail}")


def sleep_with_jitter(base: float) -> None:
    """Pause execution with +/- 25% jitter to avoid synchronized retries."""
    jitter = base * 0.25 * (0.5 - (os.urandom(1)[0] / 255.0))
    time.sleep(max(0.0, base + jitter))


def error_message(resp: requests.Response) -> str:
    """Extract GitHub's error message from a response, falling back to raw text."""
    try:
        body = resp.json()
    except ValueError:
        body = None
    if isinstance(body, dict):
        msg = body.get("message") or body.get("error")
        if msg:
            return str(msg)
    return (resp.text or "")[:300]


def build_headers(token: Optional[str] = None) -> Dict[str, str]:
    """Per-request headers; Authorization is attached only when a token is given."""
    headers: Dict[str, str] = {}
    if token:
        headers["Authorization"] = f"token {token}"
    return headers


def request_with_backoff(method: str, url: str, token: Optional[str] = None, **kwargs) -> requests.Response:
    """Perform a REST call, retrying transport errors and transient 5xx responses."""
    timeout = kwargs.pop("timeout", REQUEST_TIMEOUT)
    headers = build_headers(token)
    headers.update(kwargs.pop("headers", None) or {})
    last_exc: Optional[Exception] = None

    for attempt in range(1, MAX_RETRIES + 1):
        try:
            resp = SESSION.request(method, url, headers=headers, timeout=timeout, **kwargs)
        except requests.RequestException as exc:
            last_exc = exc
            if attempt < MAX_RETRIES:
                delay = BACKOFF_BASE_SEC * (2 ** (attempt - 1))
                print(f"[retry {attempt}/{MAX_RETRIES}] {exc} -> sleep {delay:.1f}s")
                sleep_with_jitter(delay)
            continue

        if resp.status_code in TRANSIENT_STATUSES and attempt < MAX_RETRIES:
            delay = BACKOFF_BASE_SEC * (2 ** (attempt - 1))
            print(f"[retry {attempt}/{MAX_RETRIES}] HTTP {resp.status_code} -> sleep {delay:.1f}s")
            sleep_with_jitter(delay)
            continue

        return resp

    if last_exc:
        raise last_exc
    raise RuntimeError("Request failed after retries.")


def request_page(url: str, token: Optional[str] = None) -> List[Dict[str, Any]]:
    """GET one page and return its decoded JSON array."""
    resp = request_with_backoff("GET", url, token=token)
    if not 200 <= resp.status_code < 300:
        raise ApiRequestFailed(resp.status_code, url, error_message(resp))

    try:
        batch = resp.json()
    except ValueError as exc:
        raise DecodeFailure(url, str(exc)) from exc
    if not isinstance(batch, list):
        raise DecodeFailure(url, f"expected a JSON array, got {type(batch).__name__}")
    return batch


def page_url(url: str, page: int, per_page: int, params: Optional[Dict[str, Any]] = None) -> str:
    """Build `url?[params&]page=N&per_page=P`, dropping params whose value is None."""
    query = {k: v for k, v in (params or {}).items() if v is not None}
    query.update({"page": page, "per_page": per_page})
    sep = "&" if "?" in url else "?"
    return f"{url}{sep}{urlencode(query, safe=':/')}"


def iter_pages(url: str,
               per_page: int,
               *,
               max_pages: int = 0,
               token: Optional[str] = None,
               params: Optional[Dict[str, Any]] = None) -> Iterator[Dict[str, Any]]:
    """Yield records page by page until an empty or short page, or max_pages hits.

    A non-success status ends pagination with a warning instead of an error;
    a body that does not decode to a JSON array raises DecodeFailure.
    """
    page = 1
    while True:
        if max_pages and page > max_pages:
            return
        current = page_url(url, page, per_page, params)
        try:
            batch = request_page(current, token=token)
        except ApiRequestFailed as exc:
            print(f"[warn] {current} -> {exc.status} :: {exc.message}")
            return

        if not batch:
            return
        yield from batch

        if len(batch) < per_page:
            return
        page += 1


def fetch_all(url: str,
              per_page: int,
              *,
              max_pages: int = 0,
              token: Optional[str] = None,
              params: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
    """Materialize every record of a paginated list resource, in API order."""
    return list(iter_pages(url, per_page, max_pages=max_pages, token=token, params=params))


__all__ = [
    "SESSION",
    "ApiRequestFailed",
    "DecodeFailure",
    "sleep_with_jitter",
    "error_message",
    "build_headers",
    "request_with_backoff",
    "request_page",
    "page_url",
    "iter_pages",
    "fetch_all",
]
