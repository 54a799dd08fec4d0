"""Fetch the remote hosts source over HTTP.

requests has no overall limit on a download, so the body is read here
with ``read1`` (returns as soon as any bytes arrive) and the socket
timeout is cut to the time left before every read. A server that
trickles or stalls is dropped once the total timeout is spent.
"""

from __future__ import annotations

import time

import requests
import urllib3

from hostsync import __version__
from hostsync.errors import FetchError

DEFAULT_CONNECT_TIMEOUT = 10.0
DEFAULT_TOTAL_TIMEOUT = 30.0
CHUNK_SIZE = 8192

USER_AGENT = f"hostsync/{__version__}"


def _limit_socket(raw, seconds: float) -> None:
    conn = getattr(raw, "connection", None)
    sock = getattr(conn, "sock", None)
    if sock is not None:
        sock.settimeout(seconds)


def _read_body(resp: requests.Response, url: str, deadline: float, total_timeout: float) -> bytes:
    chunks = []
    while True:
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise FetchError(f"Timed out after {total_timeout:g}s downloading {url}", url=url)
        _limit_socket(resp.raw, remaining)
        chunk = resp.raw.read1(CHUNK_SIZE, decode_content=True)
        if not chunk:
            return b"".join(chunks)
        chunks.append(chunk)


def fetch_remote(
    url: str,
    connect_timeout: float = DEFAULT_CONNECT_TIMEOUT,
    total_timeout: float = DEFAULT_TOTAL_TIMEOUT,
    session: requests.Session | None = None,
) -> str:
    """Download the remote hosts text.

    Args:
        url: Source URL.
        connect_timeout: Seconds allowed to establish the connection.
        total_timeout: Seconds allowed for the whole request, body included.
        session: Optional session to reuse (tests pass a mock).

    Returns:
        Decoded response body. UTF-8 unless the server names a charset.

    Raises:
        FetchError: Network error, timeout, or non-success status.
    """
    http = session or requests.Session()
    deadline = time.monotonic() + total_timeout
    try:
        resp = http.get(
            url,
            timeout=(min(connect_timeout, total_timeout), total_timeout),
            stream=True,
            headers={"User-Agent": USER_AGENT},
        )
        try:
            resp.raise_for_status()
            body = _read_body(resp, url, deadline, total_timeout)
        finally:
            resp.close()
    except requests.HTTPError as e:
        status = e.response.status_code if e.response is not None else "?"
        raise FetchError(f"Failed to download {url}: HTTP {status}", url=url) from e
    except (requests.Timeout, urllib3.exceptions.TimeoutError) as e:
        raise FetchError(f"Timed out downloading {url}: {e}", url=url) from e
    except (requests.RequestException, urllib3.exceptions.HTTPError) as e:
        raise FetchError(f"Failed to download {url}: {e}", url=url) from e
    finally:
        if session is None:
            http.close()

    # requests guesses ISO-8859-1 for bare text/* responses; only trust an explicit charset
    charset = "utf-8"
    if "charset=" in resp.headers.get("Content-Type", "").lower() and resp.encoding:
        charset = resp.encoding
    try:
        return body.decode(charset)
    except (LookupError, UnicodeDecodeError) as e:
        raise FetchError(f"Could not decode content from {url} as {charset}: {e}", url=url) from e
