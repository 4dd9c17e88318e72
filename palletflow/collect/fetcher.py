"""
Pallet listing fetcher.

Retrieves the pallet view of an auction listing over HTTP and hands the
page to the normalizer.  The request carries browser-like `User-Agent`
and `Accept` headers because the auction site blocks obvious bots, and
is bounded by `Settings.timeout_seconds`.  Every failure of the request
(timeout, connection error, non-2xx status) is raised as `FetchError`
so callers can report it; nothing is retried.
"""

from __future__ import annotations

import logging
import re
from time import monotonic
from typing import Optional

import requests

from ..config import Settings
from ..errors import FetchError, InvalidPalletId
from ..normalize.html_to_table import extract_table
from ..normalize.schema import ExtractionResult

logger = logging.getLogger(__name__)

MIN_PALLET_ID = 1000
MAX_PALLET_ID_DIGITS = 18
READ_CHUNK_SIZE = 8192
PALLET_PATH = "/auction/container"


def validate_pallet_id(value: object) -> str:
    """Return `value` reduced to its digits, or raise `InvalidPalletId`.

    Non-digit characters are dropped the same way the web form drops
    them while typing.
    """
    pallet_id = re.sub(r"[^0-9]", "", str(value if value is not None else ""))
    if not pallet_id:
        raise InvalidPalletId("Pallet ID is required")
    if len(pallet_id) > MAX_PALLET_ID_DIGITS:
        raise InvalidPalletId(
            f"Pallet ID must be at most {MAX_PALLET_ID_DIGITS} digits", pallet_id=pallet_id[:20]
        )
    if int(pallet_id) < MIN_PALLET_ID:
        raise InvalidPalletId(
            f"Pallet ID must be at least {MIN_PALLET_ID}", pallet_id=pallet_id
        )
    return pallet_id


def build_pallet_url(pallet_id: str, settings: Settings) -> str:
    """Return the URL of the pallet view for `pallet_id`."""
    base = settings.upstream_base_url.rstrip("/")
    return f"{base}{PALLET_PATH}?id={pallet_id}&_cmd=view&_table=pallet"


def fetch_pallet_html(
    pallet_id: str,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> str:
    """Download the listing page for a pallet.

    Args:
        pallet_id: Numeric auction id.
        settings: Upstream URL, headers and timeout.  Defaults to `Settings()`.
        session: Optional `requests.Session` to send the request with.

    Returns:
        The page HTML.

    Raises:
        FetchError: The request timed out, failed or returned an error status.
    """
    settings = settings or Settings()
    url = build_pallet_url(pallet_id, settings)
    http = session or requests
    logger.debug("GET %s", url)
    deadline = monotonic() + settings.timeout_seconds
    try:
        resp = http.get(
            url, headers=settings.headers, timeout=settings.timeout_seconds, stream=True
        )
        try:
            resp.raise_for_status()
            body = _read_body(resp, deadline)
            encoding = resp.encoding or "utf-8"
        finally:
            resp.close()
    except requests.Timeout as exc:
        raise FetchError(
            f"Timed out after {settings.timeout_seconds:g}s fetching pallet {pallet_id}",
            pallet_id=pallet_id,
        ) from exc
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else "unknown"
        raise FetchError(
            f"Upstream returned HTTP {status} for pallet {pallet_id}",
            pallet_id=pallet_id,
        ) from exc
    except requests.RequestException as exc:
        raise FetchError(
            f"Could not fetch pallet {pallet_id}: {exc}", pallet_id=pallet_id
        ) from exc
    return body.decode(encoding, errors="replace")


def _read_body(resp: requests.Response, deadline: float) -> bytes:
    """Read a streamed body, giving up once `deadline` has passed.

    The per-read timeout alone would let a server that trickles bytes
    hold the request open indefinitely.
    """
    chunks = []
    for chunk in resp.iter_content(chunk_size=READ_CHUNK_SIZE):
        chunks.append(chunk)
        if monotonic() > deadline:
            raise requests.Timeout("response body exceeded the total time budget")
    return b"".join(chunks)


def fetch_pallet(
    pallet_id: str,
    settings: Optional[Settings] = None,
    session: Optional[requests.Session] = None,
) -> ExtractionResult:
    """Fetch a pallet listing and extract its manifest table."""
    html = fetch_pallet_html(pallet_id, settings, session)
    result = extract_table(html)
    logger.info("Pallet %s: %d rows", pallet_id, len(result.rows))
    return result
