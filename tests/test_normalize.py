"""Tests for romscraper.normalize module."""

import pytest

from romscraper.normalize import clean_search_title, normalize_rom_name


class TestNormalizeRomName:
    """Tests for region tag stripping."""

    def test_strips_region_tag(self):
        assert normalize_rom_name('Chrono Trigger (J)') == 'Chrono Trigger'

    def test_unchanged_without_tag(self):
        assert normalize_rom_name('Mario Kart') == 'Mario Kart'

    def test_trims_whitespace(self):
        assert normalize_rom_name('  Mario Kart  ') == 'Mario Kart'

    def test_drops_everything_after_first_tag(self):
        raw = 'Donkey Kong Country (U) (V1.2) [!].smc'
        assert normalize_rom_name(raw) == 'Donkey Kong Country'

    @pytest.mark.parametrize('raw', [
        'Final Fantasy III (USA).smc',
        'Street Fighter II (Rev 1)',
    ])
    def test_multi_character_tags_kept(self, raw):
        assert normalize_rom_name(raw) == raw

    def test_multi_character_tag_before_region_tag(self):
        assert normalize_rom_name('Tetris (Rev 1) (E)') == 'Tetris (Rev 1)'

    def test_empty_parentheses_match(self):
        assert normalize_rom_name('Pilotwings () x') == 'Pilotwings'

    def test_empty_string(self):
        assert normalize_rom_name('') == ''


class TestCleanSearchTitle:
    """Tests for the remote query cleanup."""

    def test_removes_commas(self):
        assert clean_search_title('Lufia II, Rise') == 'Lufia II Rise'

    def test_replaces_ampersand(self):
        assert clean_search_title('Mario & Wario') == 'Mario   Wario'

    def test_plain_title_unchanged(self):
        assert clean_search_title('Chrono Trigger') == 'Chrono Trigger'
