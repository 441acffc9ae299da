"""
Entry data structure for the Indexing context.

Provides the Entry class: one content item's searchable representation with
every comparison field lowercased once, at construction.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from sieve.contexts.indexing.exceptions import InvalidContentItemError
from sieve.utils.text_processing import join_labels
from sieve.utils.timestamp import format_long_date, parse_iso_date


@dataclass(frozen=True)
class Entry:
    """
    Normalized, searchable representation of one post.

    Display fields keep their original case; the *_key and date fields are the
    comparison forms the Match Predicate reads. An Entry with an unreadable date
    has empty date fields and can only match through its title or tags.

    Factory methods:
        from_item(item) - Build from a content item mapping (title, tags, date, slug)
    """

    # Display fields
    title: str
    tags: tuple[str, ...] = ()
    slug: Optional[str] = None

    # Comparison fields (lowercased at build time)
    title_key: str = field(default="", init=False, repr=False)
    tags_key: str = field(default="", init=False, repr=False)
    date_iso: str = ""
    date_human: str = ""

    def __post_init__(self):
        if not self.title or not self.title.strip():
            raise InvalidContentItemError("Entry title must be non-empty")
        if self.date_iso:
            published = parse_iso_date(self.date_iso)
            if published is None or published.isoformat() != self.date_iso:
                raise InvalidContentItemError(
                    f"Entry date_iso must be a YYYY-MM-DD calendar date, got {self.date_iso!r}"
                )
        object.__setattr__(self, "tags", tuple(self.tags))
        # Comparison keys are derived here so direct construction stays consistent
        object.__setattr__(self, "title_key", self.title.lower())
        object.__setattr__(self, "tags_key", join_labels(self.tags).lower())
        object.__setattr__(self, "date_human", self.date_human.lower())

    @property
    def has_date(self) -> bool:
        return bool(self.date_iso)

    @property
    def search_fields(self) -> tuple[str, str, str, str]:
        """Comparison fields in match order: title, tags, ISO date, long-form date."""
        return (self.title_key, self.tags_key, self.date_iso, self.date_human)

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_item(
        cls,
        item: Mapping,
        position: Optional[int] = None,
        source_path: Optional[Path] = None,
    ) -> "Entry":
        """
        Build an Entry from a content item.

        Args:
            item: Mapping with "title", optional "tags" (None, a single label or
                  a sequence of labels), "date" (date, datetime or ISO string)
                  and optional "slug"
            position: Item position in presentation order (for error messages)
            source_path: File the item came from (for error messages)

        Returns:
            Entry with normalized comparison fields

        Raises:
            InvalidContentItemError: If the item is not a mapping or has no title
        """
        if not isinstance(item, Mapping):
            raise InvalidContentItemError(
                f"Content item must be a mapping, got {type(item).__name__}",
                position=position,
                source_path=source_path,
            )

        raw_title = item.get("title")
        title = str(raw_title).strip() if raw_title is not None else ""
        if not title:
            raise InvalidContentItemError(
                "Content item has no title", position=position, source_path=source_path
            )

        published = parse_iso_date(item.get("date"))
        slug = item.get("slug")

        return cls(
            title=title,
            tags=_coerce_tags(item.get("tags")),
            slug=str(slug) if slug is not None else None,
            date_iso=published.isoformat() if published else "",
            date_human=format_long_date(published) if published else "",
        )


def _coerce_tags(raw_tags) -> tuple[str, ...]:
    """
    Normalize the tags field to a tuple of labels.

    A missing field gives an empty tuple and a bare string is a single label.
    """
    if raw_tags is None:
        return ()
    if isinstance(raw_tags, str):
        raw_tags = [raw_tags]
    elif not isinstance(raw_tags, Sequence):
        raw_tags = [raw_tags]

    return tuple(str(tag).strip() for tag in raw_tags if tag is not None and str(tag).strip())
