"""Tests for romscraper.catalog module."""

from romscraper import CatalogRecord
from romscraper.catalog import CatalogIndex


def _index(*titles) -> CatalogIndex:
    return CatalogIndex(CatalogRecord(i, t) for i, t in enumerate(titles, start=1))


class TestExactMatch:
    """Case-insensitive equality wins outright."""

    def test_exact_match_is_sole_candidate(self):
        index = CatalogIndex([
            CatalogRecord(1, 'Zelda'),
            CatalogRecord(2, 'The Legend of Zelda'),
        ])
        assert index.find_candidates('zelda') == [CatalogRecord(1, 'Zelda')]

    def test_exact_match_discards_earlier_substring_candidates(self):
        index = CatalogIndex([
            CatalogRecord(1, 'The Legend of Zelda'),
            CatalogRecord(2, 'BS Zelda'),
            CatalogRecord(3, 'ZELDA'),
        ])
        assert index.find_candidates('Zelda') == [CatalogRecord(3, 'ZELDA')]

    def test_first_equal_title_wins(self):
        index = _index('Tetris', 'TETRIS')
        assert [r.id for r in index.find_candidates('tetris')] == [1]


class TestSubstringMatch:
    """Substring candidates must start after the first character."""

    def test_prefix_match_is_not_a_candidate(self):
        index = CatalogIndex([CatalogRecord(3, 'Mario Kart')])
        assert index.find_candidates('Mario') == []

    def test_inner_match_is_a_candidate(self):
        index = CatalogIndex([CatalogRecord(4, 'Super Mario Kart')])
        assert index.find_candidates('Mario Kart') == [CatalogRecord(4, 'Super Mario Kart')]

    def test_substring_match_case_insensitive(self):
        index = _index('SUPER MARIO WORLD')
        assert len(index.find_candidates('mario world')) == 1

    def test_candidates_in_catalog_order(self, sample_index):
        ids = [r.id for r in sample_index.find_candidates('Mario')]
        assert ids == [4, 6, 7]

    def test_query_longer_than_title(self):
        assert _index('Kart').find_candidates('Mario Kart') == []


class TestIndex:
    """General index behavior."""

    def test_len(self, sample_records):
        index = CatalogIndex(iter(sample_records))
        assert len(index) == len(sample_records)
        assert not CatalogIndex([])


class TestCaseFolding:
    """Titles are compared character by character, ignoring case."""

    def test_sharp_s_does_not_equal_double_s(self):
        index = CatalogIndex([CatalogRecord(1, 'Straße')])
        assert index.find_candidates('STRASSE') == []

    def test_sharp_s_matches_itself_in_any_case(self):
        index = CatalogIndex([CatalogRecord(1, 'Straße')])
        assert index.find_candidates('STRAßE') == [CatalogRecord(1, 'Straße')]

    def test_accented_letters_fold(self):
        index = CatalogIndex([CatalogRecord(1, 'Pokémon')])
        assert index.find_candidates('POKÉMON') == [CatalogRecord(1, 'Pokémon')]
