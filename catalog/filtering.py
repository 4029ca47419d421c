from __future__ import annotations

from typing import Sequence

from .models import ContentItem
from .utils import strip_spaces


def filter_items(items: Sequence[ContentItem], text: str) -> Sequence[ContentItem]:
    """Return the items whose name contains *text*.

    Spaces are ignored on both sides and the match is case-insensitive. An
    empty filter returns *items* itself; otherwise the input order is kept.
    """

    needle = strip_spaces(text).lower()
    if not needle:
        return items

    return [item for item in items if needle in strip_spaces(item.name).lower()]
