"""Content items as delivered by the remote catalog."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from .errors import DecodeError

_TEXT_FIELDS = ("name", "type", "url")


@dataclass(frozen=True)
class ContentItem:
    name: str = ""
    year: int = 0
    type: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, raw: Any) -> "ContentItem":
        """Build an item from one decoded JSON object.

        A ``null`` entry decodes to an empty item. Missing or ``null`` fields
        keep their zero value and unknown keys are ignored. A field of the wrong JSON type raises :class:`DecodeError`.
        """

        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise DecodeError(f"expected a JSON object, got {type(raw).__name__}")

        values: Dict[str, Any] = {}
        for field in _TEXT_FIELDS:
            value = raw.get(field)
            if value is None:
                continue
            if not isinstance(value, str):
                raise DecodeError(f"field '{field}' must be a string, got {value!r}")
            values[field] = value

        year = raw.get("year")
        if year is not None:
            # bool is an int subclass but never a valid year
            if isinstance(year, bool) or not isinstance(year, int):
                raise DecodeError(f"field 'year' must be an integer, got {year!r}")
            values["year"] = year

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
