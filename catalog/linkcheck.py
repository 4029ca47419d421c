"""Batch reachability checks for catalog URLs."""

from __future__ import annotations

import logging
import sys
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, List, Optional, Sequence

import requests
from tqdm import tqdm

from config import LINK_CHECK_DELAY_SECONDS, LINK_CHECK_MODE, MAX_LINK_WORKERS

from .errors import CatalogError, LinkUnreachable
from .loader import fetch_catalog
from .models import ContentItem
from .utils import http_request

logger = logging.getLogger(__name__)

LINK_CHECK_MODES = ("sequential", "concurrent")
NO_DEAD_ITEMS = "No dead items found."


@dataclass(frozen=True)
class LinkResult:
    item: ContentItem
    error: Optional[LinkUnreachable] = None

    @property
    def alive(self) -> bool:
        return self.error is None


def check_link(
    item: ContentItem, method: str = "HEAD", session: Optional[requests.Session] = None
) -> LinkResult:
    """Request ``item.url`` and classify it; only a 200 counts as alive."""

    try:
        # Only the status matters; a streamed GET leaves the body unread.
        resp = http_request(
            method, item.url, session=session, allow_redirects=True, stream=(method == "GET")
        )
    except requests.RequestException as exc:
        return LinkResult(item, LinkUnreachable(item.url, str(exc)))

    try:
        if resp.status_code != 200:
            return LinkResult(item, LinkUnreachable(item.url, f"HTTP {resp.status_code}"))
        return LinkResult(item)
    finally:
        resp.close()


def scan_links(
    items: Sequence[ContentItem],
    delay: float = LINK_CHECK_DELAY_SECONDS,
    progress: bool = True,
    session: Optional[requests.Session] = None,
) -> List[str]:
    """Check every item in order with HEAD and return the dead item names."""

    dead: List[str] = []
    with tqdm(total=len(items), disable=not progress, unit="item", file=sys.stdout) as bar:
        for item in items:
            result = check_link(item, "HEAD", session=session)
            if not result.alive:
                logger.info("Dead item %s (%s)", item.name, result.error.reason)
                dead.append(item.name)

            bar.update(1)
            time.sleep(delay)

    return dead


def find_dead_items(
    items: Sequence[ContentItem], max_workers: int = MAX_LINK_WORKERS
) -> List[ContentItem]:
    """Check every item concurrently with GET and return the dead items.

    Each task hands back its own :class:`LinkResult`; results are merged on
    the calling thread in catalog order.
    """

    if not items:
        return []

    # Sessions are not documented as thread-safe, so each task makes its own request.
    workers = max(1, min(max_workers, len(items)))
    with ThreadPoolExecutor(max_workers=workers) as executor:
        results = list(executor.map(lambda item: check_link(item, "GET"), items))

    dead = [result.item for result in results if not result.alive]
    logger.info("Concurrent check found %d dead of %d items", len(dead), len(items))
    return dead


def format_report(dead_names: Iterable[str]) -> str:
    names = list(dead_names)
    if not names:
        return NO_DEAD_ITEMS
    return "\n".join(["Dead items:", *names])


def run_link_check(mode: str = LINK_CHECK_MODE) -> int:
    """Load the catalog, check its links and print the report."""

    if mode not in LINK_CHECK_MODES:
        raise ValueError(f"unknown link check mode {mode!r}")

    try:
        items = fetch_catalog()
    except CatalogError as exc:
        print(f"Error getting content: {exc}")
        return 0

    if mode == "concurrent":
        dead_names = [item.name for item in find_dead_items(items)]
    else:
        dead_names = scan_links(items)

    print(format_report(dead_names))
    return 0
