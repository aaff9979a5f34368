"""Title similarity used to review non-exact matches."""

from rapidfuzz.distance import JaroWinkler


def title_similarity(query: str, title: str) -> float:
    """Jaro-Winkler similarity of two titles, ignoring case.

    Only used to help a human review the mapping; it never influences
    which record is picked.

    Args:
        query: Title that was looked up.
        title: Title of the accepted catalog record.

    Returns:
        Similarity between 0.0 and 1.0.
    """
    return round(JaroWinkler.similarity(query.casefold(), title.casefold()), 4)
