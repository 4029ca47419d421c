"""Fetch, decode and sort the remote content catalog."""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional, Union

import requests

from config import CATALOG_URL

from .errors import CatalogError, DecodeError, NetworkError
from .models import ContentItem
from .utils import http_request
from .view import CatalogFailed, CatalogLoaded

logger = logging.getLogger(__name__)


def decode_catalog(body: Union[str, bytes]) -> List[ContentItem]:
    """Decode a JSON array of content items from *body*."""

    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise DecodeError(f"invalid catalog JSON: {exc}") from exc

    if payload is None:
        return []
    if not isinstance(payload, list):
        raise DecodeError(f"expected a JSON array, got {type(payload).__name__}")

    return [ContentItem.from_dict(entry) for entry in payload]


def sort_catalog(items: Iterable[ContentItem]) -> List[ContentItem]:
    # sorted() is stable, so equal names keep their fetched order
    return sorted(items, key=lambda item: item.name.lower())


def fetch_catalog(
    url: str = CATALOG_URL, session: Optional[requests.Session] = None
) -> List[ContentItem]:
    """Download the catalog from *url* and return it sorted by name.

    Raises :class:`NetworkError` when the request fails or the server answers
    with an error status and :class:`DecodeError` when the body is not a
    catalog.
    """

    try:
        resp = http_request("GET", url, session=session)
        resp.raise_for_status()
        body = resp.content
    except requests.RequestException as exc:
        raise NetworkError(f"failed to fetch catalog from {url}: {exc}") from exc

    items = decode_catalog(body)
    logger.info("Fetched %d catalog items from %s", len(items), url)
    return sort_catalog(items)


def load_catalog(url: str = CATALOG_URL) -> Union[CatalogLoaded, CatalogFailed]:
    """Fetch the catalog and wrap the outcome as an event for the view."""

    try:
        items = fetch_catalog(url)
    except CatalogError as exc:
        logger.warning("Catalog load failed: %s", exc)
        return CatalogFailed(exc)

    return CatalogLoaded(tuple(items))
