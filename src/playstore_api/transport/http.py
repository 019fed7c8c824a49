"""
Blocking HTTPS transport. Returns raw response bytes and raises TransportError
on network failures and non-2xx statuses.
"""

import logging
from typing import Any, Optional

import httpx

from playstore_api.errors import TransportError

logger = logging.getLogger(__name__)

SCHEME = "https://"
HOST = "android.clients.google.com"
BASE_URL = SCHEME + HOST
CHECKIN_URL = BASE_URL + "/checkin"
LOGIN_URL = BASE_URL + "/auth"
C2DM_REGISTER_URL = BASE_URL + "/c2dm/register2"
FDFE_URL = BASE_URL + "/fdfe/"

PROTOBUF_CONTENT_TYPE = "application/x-protobuf"


def split_query(url: str) -> tuple[str, dict[str, str]]:
    """Split ``url`` into its address and its query parameters.

    httpx replaces a URL's query when ``params`` are passed, so server-provided
    URLs are taken apart first and their parameters sent through ``params``.
    """
    try:
        parsed = httpx.URL(url)
    except httpx.InvalidURL as e:
        raise TransportError(f"Invalid URL {url!r}: {e}") from e
    return url.partition("?")[0], dict(parsed.params)


class HttpClient:
    def __init__(self, timeout: float = 30.0, client: Optional[httpx.Client] = None):
        self._client = client or httpx.Client(timeout=timeout)

    def _send(self, method: str, url: str, **kwargs: Any) -> bytes:
        try:
            request = self._client.build_request(method, url, **kwargs)
            logger.debug("%s %s%s", request.method, request.url.host, request.url.path)
            resp = self._client.send(request)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        if resp.status_code >= 400:
            raise TransportError(f"HTTP {resp.status_code}: {resp.text[:200]}", status_code=resp.status_code)
        return resp.content

    def get(self, url: str, params: Optional[dict[str, str]] = None,
            headers: Optional[dict[str, str]] = None) -> bytes:
        """GET ``url``; ``params`` are merged into the URL's own query, winning on conflicts."""
        base, query = split_query(url)
        query.update(params or {})
        return self._send("GET", base, params=query, headers=headers)

    def post(self, url: str, body: bytes, headers: Optional[dict[str, str]] = None) -> bytes:
        """POST a serialized protobuf message."""
        headers = dict(headers or {})
        headers.setdefault("Content-Type", PROTOBUF_CONTENT_TYPE)
        return self._send("POST", url, content=body, headers=headers)

    def post_form(self, url: str, form: dict[str, str], headers: Optional[dict[str, str]] = None) -> bytes:
        """POST url-encoded form fields."""
        return self._send("POST", url, data=form, headers=headers)

    def post_query(self, url: str, params: dict[str, str], headers: Optional[dict[str, str]] = None) -> bytes:
        """POST with parameters in the query string and an empty body."""
        return self._send("POST", url, params=params, content=b"", headers=headers)

    def close(self) -> None:
        self._client.close()
