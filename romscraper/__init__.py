"""Core module for romscraper."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ConfidenceLevel(Enum):
    """How the catalog record of a ROM was obtained.

    The values double as the group headings of the text report.
    """

    EXACT = '[PERFECTO]'
    FIRST_CANDIDATE = '[First Candidate]'
    FIRST_SEARCH_RESULT = '[First Search Result]'
    NOT_FOUND = '[NOT FOUND]'

    @property
    def label(self) -> str:
        return self.value


@dataclass(frozen=True)
class CatalogRecord:
    """A game entry of the metadata catalog."""

    id: int
    title: str


@dataclass(frozen=True)
class MatchResult:
    """Mapping of one ROM file name to a catalog record."""

    rom_name: str
    record: Optional[CatalogRecord]
    confidence: ConfidenceLevel

    def __post_init__(self):
        if (self.record is None) != (self.confidence is ConfidenceLevel.NOT_FOUND):
            raise ValueError(
                f"Ungueltiges Ergebnis fuer {self.rom_name!r}: "
                f"{self.confidence.name} mit record={self.record!r}"
            )

    @property
    def found(self) -> bool:
        return self.record is not None
