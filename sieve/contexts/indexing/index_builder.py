"""
Index construction for the Indexing context.

The Index is built exactly once per page view from the static list of content
items and is never mutated afterwards. Content items come from either:

- a YAML manifest with a top-level ``posts`` list (already in presentation order)
- a directory of Markdown posts with YAML front matter (ordered newest first)
"""

import os
import time
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

from sieve.contexts.indexing.entry import Entry
from sieve.contexts.indexing.exceptions import ContentSourceNotFoundError, InvalidContentItemError
from sieve.contexts.indexing.front_matter import read_front_matter
from sieve.contexts.indexing.logger import (
    log_index_built,
    log_source_loaded,
    log_undated_entry,
)
from sieve.utils.timestamp import parse_iso_date

load_dotenv()
POSTS_PATH = Path(os.getenv("POSTS_PATH", "content/posts"))

POST_SUFFIXES = (".md", ".markdown")

Index = tuple[Entry, ...]


def build_index(items: Iterable[Mapping], source_path: Optional[Path] = None) -> Index:
    """
    Build the Index: one Entry per content item, in the order given.

    Items without tags get an empty tag string; items with a missing or
    malformed date stay in the Index and match only by title or tags.

    Args:
        items: Content items in presentation order
        source_path: Where the items came from (for error messages)

    Returns:
        Immutable tuple of Entry (empty if there are no items)

    Raises:
        InvalidContentItemError: If an item is not a mapping or has no title
    """
    start_time = time.time()
    entries = []
    undated_count = 0

    for position, item in enumerate(items):
        entry = Entry.from_item(item, position=position, source_path=source_path)
        if not entry.has_date:
            undated_count += 1
            log_undated_entry(entry.title, item.get("date"), position)
        entries.append(entry)

    log_index_built(len(entries), undated_count, time.time() - start_time)
    return tuple(entries)


# =============================================================================
# CONTENT SOURCES
# =============================================================================


def load_manifest(manifest_path: Path) -> list[dict]:
    """
    Load content items from a YAML manifest.

    Expected shape:

        posts:
          - title: Alpha Guide
            date: 2025-10-16
          - title: Beta Notes
            tags: [js]
            date: 2025-09-01

    A bare top-level list is accepted too. Manifest order is presentation order.

    Raises:
        ContentSourceNotFoundError: If the manifest does not exist
        InvalidContentItemError: If the manifest is not UTF-8 YAML or has no
            list of posts
    """
    manifest_path = Path(manifest_path)
    if not manifest_path.is_file():
        raise ContentSourceNotFoundError(manifest_path)

    try:
        text = manifest_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise InvalidContentItemError(
            f"Manifest is not valid UTF-8: {e}", source_path=manifest_path
        ) from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidContentItemError(
            f"Manifest is not valid YAML: {e}", source_path=manifest_path
        ) from e

    if data is None:
        posts = []
    elif isinstance(data, dict):
        if "posts" not in data:
            keys = ", ".join(str(key) for key in data) or "none"
            raise InvalidContentItemError(
                f"Manifest has no 'posts' key (found: {keys})", source_path=manifest_path
            )
        posts = data["posts"] or []
    else:
        posts = data

    if not isinstance(posts, list):
        raise InvalidContentItemError(
            f"Manifest 'posts' must be a list, got {type(posts).__name__}",
            source_path=manifest_path,
        )

    log_source_loaded(manifest_path, len(posts))
    return posts


def load_posts_directory(posts_dir: Path) -> list[dict]:
    """
    Load content items from the front matter of every post in a directory.

    Posts flagged ``draft: true`` are skipped. The remaining posts are ordered
    newest first; undated posts go last and ties fall back to file name.

    Raises:
        ContentSourceNotFoundError: If the directory does not exist
        FrontMatterError: If a post's front matter cannot be read
    """
    posts_dir = Path(posts_dir)
    if not posts_dir.is_dir():
        raise ContentSourceNotFoundError(posts_dir)

    post_files = sorted(p for p in posts_dir.iterdir() if p.suffix.lower() in POST_SUFFIXES)

    items = []
    skipped_drafts = 0
    for post_file in post_files:
        front_matter = read_front_matter(post_file)
        if front_matter.get("draft") is True:
            skipped_drafts += 1
            continue
        items.append(front_matter)

    log_source_loaded(posts_dir, len(items), skipped_drafts)
    return _order_newest_first(items)


def load_content_items(source_path: Path = None) -> list[dict]:
    """
    Load content items from a manifest file or a posts directory.

    Args:
        source_path: Manifest or directory. Defaults to POSTS_PATH.

    Raises:
        ContentSourceNotFoundError: If nothing exists at source_path
    """
    source_path = Path(source_path) if source_path is not None else POSTS_PATH

    if source_path.is_dir():
        return load_posts_directory(source_path)
    if source_path.is_file():
        return load_manifest(source_path)

    raise ContentSourceNotFoundError(source_path)


def _order_newest_first(items: list[dict]) -> list[dict]:
    """Sort items by date descending; undated last, slug breaks ties."""
    # Two stable passes: slug ascending first, then date descending
    by_slug = sorted(items, key=lambda item: str(item.get("slug", "")))
    dated = [item for item in by_slug if parse_iso_date(item.get("date"))]
    undated = [item for item in by_slug if not parse_iso_date(item.get("date"))]
    dated.sort(key=lambda item: parse_iso_date(item.get("date")), reverse=True)
    return dated + undated
