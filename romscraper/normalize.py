"""ROM file name normalization."""

import re

# Region/language tags such as "(J)", "(U)" or "(E)". Deliberately narrow:
# "(USA)" or "(Rev 1)" do not match.
_ROM_LANGUAGE_RE = re.compile(r'\(.?\)', re.IGNORECASE)


def normalize_rom_name(raw_name: str) -> str:
    """Strip the region annotation from a ROM file name.

    The name is cut at the first single-character parenthesized tag;
    everything after it (further tags, the extension) is dropped. Names
    without such a tag are only trimmed.

    Args:
        raw_name: ROM file name as listed in the ROM list.

    Returns:
        Canonical title used for catalog lookups.
    """
    match = _ROM_LANGUAGE_RE.search(raw_name)
    if match:
        raw_name = raw_name[:match.start()]
    return raw_name.strip()


def clean_search_title(title: str) -> str:
    """Prepare a normalized title for the remote search endpoint.

    Commas are removed and ampersands replaced by a space.
    """
    return title.replace(',', '').replace('&', ' ')
