"""
Indexing Context

Responsibilities:
- Reads the static list of posts once (manifest or front matter of post files)
- Builds the immutable Index of normalized, searchable Entries
- Lowercases every comparison field at build time

Owns: Entry shape, Index construction, content source loading
Never: Evaluates queries or touches presentation state
"""

from sieve.contexts.indexing.entry import Entry
from sieve.contexts.indexing.exceptions import (
    ContentSourceNotFoundError,
    FrontMatterError,
    InvalidContentItemError,
)
from sieve.contexts.indexing.index_builder import (
    Index,
    build_index,
    load_content_items,
    load_manifest,
    load_posts_directory,
)

__all__ = [
    # Data structures
    "Entry",
    "Index",
    # Index construction and content sources
    "build_index",
    "load_content_items",
    "load_manifest",
    "load_posts_directory",
    # Exceptions
    "ContentSourceNotFoundError",
    "FrontMatterError",
    "InvalidContentItemError",
]
