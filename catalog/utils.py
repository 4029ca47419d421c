from __future__ import annotations

from typing import Optional

import requests

from config import REQUEST_TIMEOUT_SECONDS

HEADERS = {
    "User-Agent": "catalog-browser/1.0 (+https://github.com/d-a-s-h-o/stream)",
    "Accept": "application/json, */*;q=0.8",
}


def http_request(method, url, session: Optional[requests.Session] = None, **kwargs):
    """Issue *method* against *url* and return the response.

    Errors from ``requests`` propagate to the caller. A shared *session* is
    used when supplied so concurrent checks can reuse connections.
    """

    client = session or requests
    kwargs.setdefault("headers", HEADERS)
    kwargs.setdefault("timeout", REQUEST_TIMEOUT_SECONDS)
    return client.request(method, url, **kwargs)


def strip_spaces(text):
    return text.replace(" ", "")


def fit_width(text, width):
    """Pad *text* to *width*, or cut it down and end it with an ellipsis."""

    if len(text) > width:
        return text[: max(width - 3, 0)] + "..."
    return text.ljust(width)


def shorten_middle(text, keep=10):
    """Keep the first and last *keep* characters of *text* around ``...``."""

    if len(text) <= keep * 2 + 3:
        return text
    return f"{text[:keep]}...{text[-keep:]}"
