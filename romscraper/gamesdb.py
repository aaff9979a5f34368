"""HTTP access to the TheGamesDB legacy XML API."""

import logging
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import Iterator, Optional

import requests

from romscraper import CatalogRecord
from romscraper.reader import iter_game_records, parse_game_list
from romscraper.errors import CatalogLoadError, RemoteSearchError

log = logging.getLogger(__name__)

DEFAULT_BASE_URL = 'http://thegamesdb.net/api'
DEFAULT_TIMEOUT = 30.0


class GamesDbClient:
    """Thin wrapper around the two catalog endpoints.

    Args:
        session: HTTP session to use; a new ``requests.Session`` by default.
        base_url: API root without trailing slash.
        timeout: Timeout in seconds for every request.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def _get(self, endpoint: str, params: dict) -> requests.Response:
        url = f"{self.base_url}/{endpoint}"
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response

    def fetch_platform_games(self, platform_id: int) -> bytes:
        """Download the raw game list document of a platform."""
        log.info("Lade Spieleliste fuer Plattform %d ...", platform_id)
        return self._get('GetPlatformGames.php', {'platform': platform_id}).content

    def search(self, title: str, platform_label: str) -> Iterator[CatalogRecord]:
        """Search the catalog for a single title.

        Args:
            title: Search term, already cleaned for the endpoint.
            platform_label: Platform name as known by the catalog service.

        Returns:
            Lazy iterator over the hits in the order returned by the service.

        Raises:
            RemoteSearchError: On transport errors or an unparseable response.
        """
        log.debug("Suche %r auf %s", title, platform_label)
        try:
            response = self._get('GetGame.php', {'name': title, 'platform': platform_label})
            return iter_game_records(response.content)
        except requests.RequestException as exc:
            raise RemoteSearchError(title, str(exc)) from exc
        except ET.ParseError as exc:
            raise RemoteSearchError(title, f"ungueltige Antwort ({exc})") from exc


def load_catalog(
    client: GamesDbClient,
    cache_path: str | Path,
    platform_id: int,
    force_update: bool = False,
) -> list[CatalogRecord]:
    """Load the catalog of a platform, downloading it into the cache if needed.

    The document is fetched when ``cache_path`` does not exist or
    ``force_update`` is set, then the cached file is parsed.

    Raises:
        CatalogLoadError: If the download, the cache file or the XML fails.
        MalformedRecordError: If a game entry is incomplete.
    """
    cache_path = Path(cache_path)
    try:
        if force_update or not cache_path.exists():
            content = client.fetch_platform_games(platform_id)
            cache_path.parent.mkdir(parents=True, exist_ok=True)
            cache_path.write_bytes(content)
            log.info("Spieleliste gespeichert: %s", cache_path)
        records = parse_game_list(cache_path.read_bytes())
    except requests.RequestException as exc:
        raise CatalogLoadError(f"Download der Spieleliste fehlgeschlagen: {exc}") from exc
    except OSError as exc:
        raise CatalogLoadError(f"Spieleliste {cache_path} nicht lesbar: {exc}") from exc
    except ET.ParseError as exc:
        raise CatalogLoadError(f"Spieleliste {cache_path} ist kein gueltiges XML: {exc}") from exc

    log.info("%d Spiele im Katalog (%s)", len(records), cache_path)
    return records
