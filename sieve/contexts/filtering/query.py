"""Query normalization."""

from typing import Optional

# Distinguished "no filter" query: matches every entry
MATCH_ALL = ""


def normalize_query(raw_query: Optional[str]) -> str:
    """
    Reduce raw search box text to its comparison form: trimmed and lowercased.

    Whitespace-only (or missing) input normalizes to MATCH_ALL.

    Examples:
        normalize_query("  Alpha ")  # "alpha"
        normalize_query("   ")       # ""
        normalize_query(None)        # ""
    """
    if not raw_query:
        return MATCH_ALL
    return raw_query.strip().lower()


def is_match_all(query: str) -> bool:
    """Check whether a normalized query leaves the list unfiltered."""
    return query == MATCH_ALL
