"""Readers for the local ROM list and catalog XML documents."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator

from romscraper import CatalogRecord
from romscraper.errors import MalformedRecordError

log = logging.getLogger(__name__)


def detect_encoding(path: Path) -> str:
    """Detect file encoding by checking for BOM bytes.

    Args:
        path: Path to the text file.

    Returns:
        Encoding string suitable for open().
    """
    with open(path, 'rb') as f:
        bom = f.read(2)
    if bom in (b'\xff\xfe', b'\xfe\xff'):
        return 'utf-16'
    return 'utf-8-sig'


def read_rom_list(path: str | Path) -> list[str]:
    """Read ROM file names, one per line.

    Blank lines are skipped; duplicates are kept in order.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    path = Path(path)
    with open(path, 'r', encoding=detect_encoding(path)) as f:
        roms = [line for line in f.read().splitlines() if line.strip()]

    log.info("%d ROMs gelesen aus %s", len(roms), path)
    return roms


def _read_element(game: ET.Element, name: str) -> str:
    node = game.find(name)
    if node is None:
        raise MalformedRecordError(f"Game-Eintrag ohne <{name}>")
    return node.text or ''


def parse_game(game: ET.Element) -> CatalogRecord:
    """Convert a ``Game`` element into a CatalogRecord.

    An empty ``GameTitle`` element yields a record with an empty title.

    Raises:
        MalformedRecordError: If ``id`` or ``GameTitle`` is missing or the
            id is not an integer.
    """
    raw_id = _read_element(game, 'id')
    title = _read_element(game, 'GameTitle')
    try:
        game_id = int(raw_id)
    except ValueError:
        raise MalformedRecordError(
            f"Ungueltige Spiel-ID {raw_id!r} fuer {title!r}"
        ) from None
    return CatalogRecord(id=game_id, title=title)


def iter_game_records(document: bytes | str) -> Iterator[CatalogRecord]:
    """Return the records of every ``Game`` element in document order.

    The document is parsed right away; elements are converted one at a
    time, so a malformed record only fails once the caller advances to it.

    Raises:
        xml.etree.ElementTree.ParseError: If the document is not valid XML.
    """
    root = ET.fromstring(document)
    return (parse_game(game) for game in root.iter('Game'))


def parse_game_list(document: bytes | str) -> list[CatalogRecord]:
    """Parse a complete catalog document."""
    return list(iter_game_records(document))
