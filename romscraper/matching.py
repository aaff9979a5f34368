"""Matching engine mapping ROM file names to catalog records."""

import logging
from typing import Callable, Iterable, Optional

from romscraper import CatalogRecord, ConfidenceLevel, MatchResult
from romscraper.catalog import CatalogIndex
from romscraper.errors import RemoteSearchError
from romscraper.normalize import clean_search_title, normalize_rom_name
from romscraper.scoring import title_similarity

log = logging.getLogger(__name__)

# Called with (queried title, accepted record) for every non-exact match.
MatchObserver = Callable[[str, CatalogRecord], None]


def log_trace(query: str, record: CatalogRecord) -> None:
    """Default observer: log the pairing for manual validation."""
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "%s => %s (%.2f)", query, record.title, title_similarity(query, record.title),
        )


def resolve(
    rom_name: str,
    index: CatalogIndex,
    search_client,
    platform_label: str,
    observer: Optional[MatchObserver] = None,
) -> MatchResult:
    """Resolve a single ROM file name.

    1. Exactly one local candidate -> EXACT
    2. Several local candidates -> first one, FIRST_CANDIDATE
    3. No local candidate -> first hit of a remote title search,
       FIRST_SEARCH_RESULT, or NOT_FOUND when the search is empty

    Args:
        rom_name: Raw ROM file name.
        index: Catalog of the platform.
        search_client: Object with a ``search(title, platform_label)``
            method returning an iterator of CatalogRecord.
        platform_label: Platform name passed to the remote search.
        observer: Notified about every non-exact match.

    Returns:
        The MatchResult for ``rom_name``.

    Raises:
        RemoteSearchError: If the remote search fails.
    """
    title = normalize_rom_name(rom_name)
    candidates = index.find_candidates(title)

    if len(candidates) == 1:
        return MatchResult(rom_name, candidates[0], ConfidenceLevel.EXACT)

    if candidates:
        if observer:
            observer(title, candidates[0])
        return MatchResult(rom_name, candidates[0], ConfidenceLevel.FIRST_CANDIDATE)

    query = clean_search_title(title)
    hit = next(iter(search_client.search(query, platform_label)), None)
    if hit is None:
        return MatchResult(rom_name, None, ConfidenceLevel.NOT_FOUND)

    if observer:
        observer(query, hit)
    return MatchResult(rom_name, hit, ConfidenceLevel.FIRST_SEARCH_RESULT)


class MappingPipeline:
    """Resolve a whole ROM list against one platform catalog.

    Args:
        index: Catalog of the platform.
        search_client: Remote search used when the catalog has no candidate.
        platform_label: Platform name passed to the remote search.
        observer: Notified about every non-exact match; ``log_trace`` by
            default, ``None`` disables it.
        skip_failed_searches: Record a failed remote search as NOT_FOUND
            and continue instead of aborting the run.
    """

    def __init__(
        self,
        index: CatalogIndex,
        search_client,
        platform_label: str,
        observer: Optional[MatchObserver] = log_trace,
        skip_failed_searches: bool = False,
    ):
        self.index = index
        self.search_client = search_client
        self.platform_label = platform_label
        self.observer = observer
        self.skip_failed_searches = skip_failed_searches

    def resolve(self, rom_name: str) -> MatchResult:
        try:
            return resolve(
                rom_name, self.index, self.search_client,
                self.platform_label, self.observer,
            )
        except RemoteSearchError as exc:
            if not self.skip_failed_searches:
                raise
            log.warning("%s - als nicht gefunden gewertet", exc)
            return MatchResult(rom_name, None, ConfidenceLevel.NOT_FOUND)

    def run(self, rom_names: Iterable[str]) -> list[MatchResult]:
        """Resolve every ROM name in input order, duplicates included.

        Returns one result per given name. Names read with
        ``read_rom_list`` no longer include blank lines, so a ROM list
        with blank lines yields fewer results than it has lines.
        """
        results = [self.resolve(rom_name) for rom_name in rom_names]

        found = sum(1 for r in results if r.found)
        log.info(
            "Zuordnung abgeschlossen: %d ROMs verarbeitet, %d zugeordnet",
            len(results), found,
        )
        return results
