"""Exceptions raised while building the ROM mapping."""


class ScraperError(Exception):
    """Base class for all fatal errors of a mapping run."""


class CatalogLoadError(ScraperError):
    """The catalog could not be downloaded, read or parsed."""


class MalformedRecordError(ScraperError):
    """A ``Game`` element lacks ``id``/``GameTitle`` or has a non-numeric id."""


class RemoteSearchError(ScraperError):
    """The remote title search failed for a single title."""

    def __init__(self, title: str, reason: str):
        super().__init__(f"Suche nach {title!r} fehlgeschlagen: {reason}")
        self.title = title
        self.reason = reason
