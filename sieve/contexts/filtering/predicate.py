"""
Match Predicate for the Filtering context.

A query matches an entry when it is empty or is a plain substring of any of
the entry's comparison fields:

- title (lowercased)
- tags, space-joined and lowercased
- ISO date, e.g. "2025-10-16"
- long-form date, e.g. "october 16, 2025"

There is no tokenization: "ctob" matches "october", and "2025-10" matches
every post from October 2025. Short numeric queries can also hit unrelated
date digits ("16" matches "2016-03-02"); that is accepted behavior.
"""

from collections.abc import Sequence

from sieve.contexts.filtering.query import is_match_all
from sieve.contexts.indexing.entry import Entry


def matches(query: str, entry: Entry) -> bool:
    """
    Decide whether a normalized query is satisfied by an entry.

    Pure function of (query, entry). Entry fields are already lowercased at
    index build time; only the query is case-folded here.

    Args:
        query: Normalized query (see normalize_query); any casing is accepted
        entry: Indexed entry

    Returns:
        True if the query is empty or a substring of any comparison field
    """
    query = query.lower()
    if is_match_all(query):
        return True
    return any(query in field for field in entry.search_fields)


def evaluate(query: str, index: Sequence[Entry]) -> list[bool]:
    """Verdict for every entry, in index order."""
    return [matches(query, entry) for entry in index]


def filter_entries(query: str, index: Sequence[Entry]) -> list[Entry]:
    """Entries matching the query, in index order."""
    return [entry for entry in index if matches(query, entry)]
