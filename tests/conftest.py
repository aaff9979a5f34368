"""Shared test fixtures."""

from pathlib import Path

import pytest

from romscraper import CatalogRecord
from romscraper.catalog import CatalogIndex
from romscraper.reader import parse_game_list


DATA_DIR = Path(__file__).resolve().parent.parent / 'data'


class StubSearch:
    """Remote search returning fixed hits per query and recording calls."""

    def __init__(self, hits=None, error=None):
        self.hits = hits or {}
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def search(self, title, platform_label):
        self.calls.append((title, platform_label))
        if self.error:
            raise self.error
        return iter(self.hits.get(title, []))


@pytest.fixture(scope='session')
def data_dir() -> Path:
    """Path to the data directory."""
    return DATA_DIR


@pytest.fixture(scope='session')
def sample_records() -> list[CatalogRecord]:
    """All records from data/gamelist.xml."""
    return parse_game_list((DATA_DIR / 'gamelist.xml').read_bytes())


@pytest.fixture
def sample_index(sample_records) -> CatalogIndex:
    return CatalogIndex(sample_records)


@pytest.fixture
def stub_search():
    return StubSearch()
