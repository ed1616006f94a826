"""
HTTP session used by every network-backed provider.

Discovery runs interactively, so retries are short: a few quick attempts on
connection errors and 429/5xx responses, then the provider gives up and the
flower is stored without that data.

Usage::

    from flower_discovery.services.http import session

    resp = session.get(url, params={...})
    resp.raise_for_status()
"""

from __future__ import annotations

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

USER_AGENT = "flower-discovery/0.1"

#: Retry strategy for idempotent requests.
DEFAULT_RETRY = Retry(
    total=3,
    backoff_factor=0.5,  # 0s, 0.5s, 1s
    status_forcelist=[429, 500, 502, 503, 504],
    allowed_methods=["GET", "HEAD"],
    raise_on_status=False,
)

DEFAULT_TIMEOUT = 10  # seconds


def create_session(
    retry: Retry | None = None,
    timeout: float = DEFAULT_TIMEOUT,
    user_agent: str = USER_AGENT,
) -> requests.Session:
    """
    Build a ``requests.Session`` with the retry adapter mounted.

    Args:
        retry: Retry strategy (defaults to ``DEFAULT_RETRY``).
        timeout: Timeout applied to requests that do not pass one.
        user_agent: Value of the ``User-Agent`` header.
    """
    s = requests.Session()
    adapter = HTTPAdapter(max_retries=retry or DEFAULT_RETRY)
    for prefix in ("https://", "http://"):
        s.mount(prefix, adapter)
    s.headers["User-Agent"] = user_agent

    send = s.send

    def send_with_timeout(prepared: requests.PreparedRequest, **kwargs: object) -> requests.Response:
        kwargs.setdefault("timeout", timeout)
        return send(prepared, **kwargs)  # type: ignore[arg-type]

    s.send = send_with_timeout  # type: ignore[method-assign]
    return s


session: requests.Session = create_session()
