"""
Filtering Context

Responsibilities:
- Normalizes the raw search box text
- Decides per entry whether the query matches (multi-field substring containment)
- Applies shown/hidden state to every entry on each input change
- Publishes the visible count

Owns: Query semantics, visibility state, visible count
Never: Mutates or reorders the Index
"""

from sieve.contexts.filtering.count_reporter import (
    CountDisplay,
    CountReporter,
    InMemoryCountDisplay,
)
from sieve.contexts.filtering.post_filter import FilterResult, PostFilter
from sieve.contexts.filtering.predicate import evaluate, filter_entries, matches
from sieve.contexts.filtering.query import MATCH_ALL, normalize_query
from sieve.contexts.filtering.query_input import QueryInput
from sieve.contexts.filtering.visibility import (
    InMemorySurface,
    PresentationSurface,
    VisibilityRenderer,
)

__all__ = [
    # Pipeline stages
    "normalize_query",
    "MATCH_ALL",
    "matches",
    "evaluate",
    "filter_entries",
    "VisibilityRenderer",
    "CountReporter",
    # Surfaces
    "PresentationSurface",
    "InMemorySurface",
    "CountDisplay",
    "InMemoryCountDisplay",
    "QueryInput",
    # Component
    "PostFilter",
    "FilterResult",
]
