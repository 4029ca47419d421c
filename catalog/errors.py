"""Errors raised while loading the catalog or checking its links."""


class CatalogBrowserError(Exception):
    """Base class for every error raised by the catalog browser."""


class CatalogError(CatalogBrowserError):
    """The catalog could not be loaded."""


class NetworkError(CatalogError):
    """The catalog request failed or returned an error status."""


class DecodeError(CatalogError):
    """The catalog body was not a JSON array of content items."""


class LinkUnreachable(CatalogBrowserError):
    """An item URL failed the reachability check."""

    def __init__(self, url: str, reason: str):
        super().__init__(f"{url}: {reason}")
        self.url = url
        self.reason = reason


class StartupError(CatalogBrowserError):
    """The terminal UI could not be started."""
