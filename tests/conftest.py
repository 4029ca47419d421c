import pytest

from catalog.models import ContentItem


class FakeResponse:
    def __init__(self, status_code=200, content=b"", error=None):
        self.status_code = status_code
        self.content = content
        self.closed = False
        self._error = error

    def raise_for_status(self):
        if self._error is not None:
            raise self._error

    def close(self):
        self.closed = True


@pytest.fixture
def items():
    return [
        ContentItem(name="alpha", year=1999, type="movie", url="https://cdn.test/alpha.mp4"),
        ContentItem(name="Zeta", year=2001, type="series", url="https://cdn.test/zeta"),
        ContentItem(name="Alloy", year=2015, type="movie", url="https://cdn.test/alloy.mkv"),
    ]
