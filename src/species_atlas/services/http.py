"""
Shared HTTP client for the public data sources.

Provides a pre-configured ``requests.Session`` that retries transient
failures (429/502/503/504) on idempotent methods, plus ``fetch_json``,
the bounded-timeout wrapper every source adapter goes through.

``fetch_json`` never raises: a timeout, a non-2xx status, a network error or
a body that is not JSON all come back as ``None`` ("unavailable").

Usage::

    from species_atlas.services.http import fetch_json

    data = fetch_json("https://api.gbif.org/v1/species/match", {"name": "Danaus plexippus"})
    if data is None:
        ...  # source had nothing for us
"""

from __future__ import annotations

import logging
from typing import Any

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from species_atlas import __version__

logger = logging.getLogger(__name__)

#: One quick retry on connect errors and busy statuses; a timed-out read is final.
DEFAULT_RETRY = Retry(
    total=1,
    read=0,
    backoff_factor=0.5,
    status_forcelist=[429, 502, 503, 504],
    allowed_methods=["GET", "HEAD", "OPTIONS"],
    raise_on_status=False,  # let fetch_json look at the status itself
)

DEFAULT_TIMEOUT = 5.0  # seconds

USER_AGENT = f"species-atlas/{__version__}"


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with retry adapter mounted.

    Args:
        retry: Custom retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Default timeout applied to every request.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    s.mount("https://", adapter)
    s.mount("http://", adapter)
    s.headers["User-Agent"] = USER_AGENT

    # Inject a default timeout so no request can hang without a bound.
    _original_send = s.send

    def _send_with_timeout(
        prepared: requests.PreparedRequest, **kwargs: object
    ) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return _original_send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = _send_with_timeout  # type: ignore[method-assign]
    return s


#: Module-level session, import and use directly.
session: requests.Session = create_session()


def fetch_json(
    url: str,
    params: dict[str, Any] | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any | None:
    """
    GET ``url`` and decode the JSON body, or return ``None`` if unavailable.

    Args:
        url: Endpoint URL.
        params: Query string parameters.
        timeout: Per-call timeout in seconds.

    Returns:
        The decoded JSON value, or ``None`` on timeout, non-2xx status,
        network failure or malformed body.
    """
    try:
        resp = session.get(url, params=params or {}, timeout=timeout)
        resp.raise_for_status()
        return resp.json()
    except requests.Timeout:
        logger.debug("Source timed out after %.1fs: %s", timeout, url)
    except requests.HTTPError as exc:
        status = exc.response.status_code if exc.response is not None else "?"
        logger.debug("Source returned %s: %s", status, url)
    except ValueError:
        # requests.JSONDecodeError is also a RequestException, so check it first
        logger.debug("Source returned a malformed body: %s", url)
    except requests.RequestException as exc:
        logger.debug("Source unreachable (%s): %s", exc, url)
    return None
