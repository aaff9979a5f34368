"""romscraper – CLI-Tool zur Zuordnung von ROM-Dateinamen zu TheGamesDB-Eintraegen."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from romscraper.catalog import CatalogIndex
from romscraper.config import DEFAULT_PLATFORM_ID, DEFAULT_PLATFORM_LABEL, ScraperConfig
from romscraper.errors import ScraperError
from romscraper.gamesdb import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, GamesDbClient, load_catalog
from romscraper.matching import MappingPipeline
from romscraper.reader import read_rom_list
from romscraper.reporter import print_summary, write_html_report, write_text_report


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        description='Ordnet ROM-Dateinamen den Spielen aus TheGamesDB zu.',
        prog='mapper.py',
    )
    parser.add_argument(
        '--roms', required=True, type=Path,
        help='Pfad zur ROM-Liste (ein Dateiname pro Zeile)',
    )
    parser.add_argument(
        '--catalog', type=Path, default=Path('gamelist.xml'),
        help='Cache-Datei fuer die Spieleliste (Standard: gamelist.xml)',
    )
    parser.add_argument(
        '--update', action='store_true',
        help='Spieleliste neu herunterladen, auch wenn der Cache existiert',
    )
    parser.add_argument(
        '--output', type=Path, default=Path('gamemapping.txt'),
        help='Pfad fuer den Text-Report (Standard: gamemapping.txt)',
    )
    parser.add_argument(
        '--html', type=Path,
        help='Zusaetzlich einen HTML-Report an diesen Pfad schreiben',
    )
    parser.add_argument(
        '--summary', action='store_true',
        help='Zusammenfassung auf stdout ausgeben',
    )
    parser.add_argument(
        '--platform-id', type=int, default=DEFAULT_PLATFORM_ID,
        help=f'Plattform-ID in TheGamesDB (Standard: {DEFAULT_PLATFORM_ID})',
    )
    parser.add_argument(
        '--platform', default=DEFAULT_PLATFORM_LABEL,
        help=f'Plattform-Name fuer die Suche (Standard: {DEFAULT_PLATFORM_LABEL})',
    )
    parser.add_argument(
        '--base-url', default=DEFAULT_BASE_URL,
        help=f'Basis-URL der API (Standard: {DEFAULT_BASE_URL})',
    )
    parser.add_argument(
        '--timeout', type=float, default=DEFAULT_TIMEOUT,
        help=f'HTTP-Timeout in Sekunden (Standard: {DEFAULT_TIMEOUT:g})',
    )
    parser.add_argument(
        '--skip-failed-searches', action='store_true',
        help='Fehlgeschlagene Suchen als nicht gefunden werten statt abzubrechen',
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true',
        help='Debug-Ausgaben (u.a. alle nicht-exakten Zuordnungen)',
    )
    return parser


def run(config: ScraperConfig, client: Optional[GamesDbClient] = None) -> list:
    """Execute one mapping run and write the reports."""
    client = client or GamesDbClient(base_url=config.base_url, timeout=config.timeout)

    rom_names = read_rom_list(config.rom_list)
    index = CatalogIndex(load_catalog(
        client, config.catalog_cache, config.platform_id, config.force_update,
    ))
    if not len(index):
        logging.warning("Katalog %s enthaelt keine Spiele, alle ROMs werden gesucht.",
                        config.catalog_cache)

    pipeline = MappingPipeline(
        index, client, config.platform_label,
        skip_failed_searches=config.skip_failed_searches,
    )
    results = pipeline.run(rom_names)

    write_text_report(results, config.output)

    if config.html:
        write_html_report(results, config.html, config.platform_label)

    if config.summary:
        print_summary(results, config.platform_label)

    return results


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(levelname)s: %(message)s',
    )

    if not args.roms.exists():
        parser.error(f'ROM-Liste {args.roms} existiert nicht.')

    try:
        run(ScraperConfig.from_args(args))
    except ScraperError as exc:
        logging.error("%s", exc)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
