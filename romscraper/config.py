"""Run configuration for a mapping run."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from romscraper.gamesdb import DEFAULT_BASE_URL, DEFAULT_TIMEOUT

DEFAULT_PLATFORM_ID = 6
DEFAULT_PLATFORM_LABEL = 'Super Nintendo (SNES)'


@dataclass
class ScraperConfig:
    """Settings for one run, normally built from the command line."""

    rom_list: Path
    catalog_cache: Path = Path('gamelist.xml')
    output: Path = Path('gamemapping.txt')
    platform_id: int = DEFAULT_PLATFORM_ID
    platform_label: str = DEFAULT_PLATFORM_LABEL
    force_update: bool = False
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    html: Optional[Path] = None
    summary: bool = False
    skip_failed_searches: bool = False

    @classmethod
    def from_args(cls, args) -> 'ScraperConfig':
        """Build a config from parsed argparse arguments."""
        return cls(
            rom_list=args.roms,
            catalog_cache=args.catalog,
            output=args.output,
            platform_id=args.platform_id,
            platform_label=args.platform,
            force_update=args.update,
            base_url=args.base_url,
            timeout=args.timeout,
            html=args.html,
            summary=args.summary,
            skip_failed_searches=args.skip_failed_searches,
        )
