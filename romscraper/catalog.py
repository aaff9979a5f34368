"""In-memory catalog of a single platform."""

import logging
from typing import Iterable

from romscraper import CatalogRecord

log = logging.getLogger(__name__)


def _fold(value: str) -> str:
    """Uppercase a title character by character for comparison.

    Characters whose uppercase form has more than one character (``ß``)
    are kept as they are, so titles only compare equal position by position.
    """
    return ''.join(ch if len(ch.upper()) != 1 else ch.upper() for ch in value)


class CatalogIndex:
    """Read-only, ordered collection of catalog records.

    The catalog of one platform holds a few thousand games at most, so
    lookups scan the records linearly in catalog order.
    """

    def __init__(self, records: Iterable[CatalogRecord]):
        self._records: tuple[CatalogRecord, ...] = tuple(records)
        self._folded: tuple[str, ...] = tuple(_fold(r.title) for r in self._records)
        log.debug("Katalog-Index mit %d Eintraegen aufgebaut", len(self._records))

    def __len__(self) -> int:
        return len(self._records)

    def find_candidates(self, normalized_title: str) -> list[CatalogRecord]:
        """Find the records matching a normalized ROM title.

        A case-insensitive equal title is returned as the only candidate,
        discarding substring candidates collected earlier in the scan.
        Otherwise every record containing the title at a position greater
        than zero is a candidate; titles starting with the query are not.

        Args:
            normalized_title: Output of ``normalize_rom_name``.

        Returns:
            Candidates in catalog order, possibly empty.
        """
        query = _fold(normalized_title)
        candidates: list[CatalogRecord] = []

        for record, title in zip(self._records, self._folded):
            if title == query:
                return [record]
            if title.find(query) > 0:
                candidates.append(record)

        return candidates
