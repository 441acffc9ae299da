"""
PostFilter: the incremental search component.

Holds its own Index, presentation surface and count display. Each input
change runs the pipeline synchronously to completion:

    normalize_query -> matches (every entry) -> VisibilityRenderer -> CountReporter

Usage:
    from sieve.contexts.filtering import PostFilter, QueryInput

    post_filter = PostFilter.attach(Path("content/posts"))
    search_box = QueryInput()
    post_filter.bind(search_box)

    search_box.set_text("october")
    post_filter.count_display.value  # number of posts from October
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional

from sieve.contexts.filtering.count_reporter import (
    CountDisplay,
    CountReporter,
    InMemoryCountDisplay,
)
from sieve.contexts.filtering.logger import (
    log_container_missing,
    log_filter_attached,
    log_filter_pass,
)
from sieve.contexts.filtering.predicate import evaluate
from sieve.contexts.filtering.query import normalize_query
from sieve.contexts.filtering.query_input import QueryInput
from sieve.contexts.filtering.visibility import (
    InMemorySurface,
    PresentationSurface,
    VisibilityRenderer,
)
from sieve.contexts.indexing import (
    ContentSourceNotFoundError,
    Entry,
    Index,
    build_index,
    load_content_items,
)
from sieve.contexts.indexing.index_builder import POSTS_PATH

SurfaceFactory = Callable[[Index], PresentationSurface]


@dataclass(frozen=True)
class FilterResult:
    """Outcome of one filtering pass."""

    query: str
    visible: tuple[Entry, ...]
    count: int
    total: int


class PostFilter:
    """
    Multi-field substring filter bound to one fixed Index.

    An inactive filter (content container absent at attach time) ignores
    input and leaves the surface in its default, fully visible state.
    """

    def __init__(
        self,
        index: Index,
        surface: Optional[PresentationSurface] = None,
        count_display: Optional[CountDisplay] = None,
        active: bool = True,
    ):
        self.index: Index = tuple(index)
        self.surface = surface if surface is not None else InMemorySurface(len(self.index))
        self.count_display = count_display if count_display is not None else InMemoryCountDisplay()
        self.active = active

        self._renderer = VisibilityRenderer(self.surface)
        self._reporter = CountReporter(self.surface, self.count_display)

    @classmethod
    def attach(
        cls,
        source_path: Path = None,
        surface_factory: Optional[SurfaceFactory] = None,
        count_display: Optional[CountDisplay] = None,
    ) -> "PostFilter":
        """
        Load the content container, build the Index once, and return a filter.

        Args:
            source_path: Manifest file or posts directory (defaults to POSTS_PATH)
            surface_factory: Builds the presentation surface for the Index;
                             defaults to an InMemorySurface
            count_display: Where the visible count is published

        Returns:
            Active PostFilter, or an inactive one with an empty Index if the
            container does not exist
        """
        source_path = Path(source_path) if source_path is not None else POSTS_PATH
        try:
            items = load_content_items(source_path)
        except ContentSourceNotFoundError as e:
            log_container_missing(e.source_path)
            index: Index = ()
            surface = surface_factory(index) if surface_factory else None
            return cls(index, surface=surface, count_display=count_display, active=False)

        index = build_index(items, source_path=source_path)
        surface = surface_factory(index) if surface_factory else None
        log_filter_attached(source_path, len(index))
        return cls(index, surface=surface, count_display=count_display)

    def bind(self, query_input: QueryInput) -> None:
        """Subscribe this filter's pipeline to an input surface."""
        query_input.subscribe(self.on_input)

    def on_input(self, raw_query: str) -> Optional[FilterResult]:
        """Input change callback. Does nothing while the filter is inactive."""
        if not self.active:
            return None
        return self.apply(raw_query)

    def apply(self, raw_query: Optional[str]) -> FilterResult:
        """
        Run one full filtering pass for the given raw query.

        Returns:
            FilterResult with the visible entries (in index order) and count
        """
        start_time = time.time()
        query = normalize_query(raw_query)
        verdicts = evaluate(query, self.index)

        self._renderer.render(self.index, verdicts)
        count = self._reporter.report()

        visible = tuple(entry for entry, verdict in zip(self.index, verdicts) if verdict)
        log_filter_pass(query, count, len(self.index), time.time() - start_time)

        return FilterResult(query=query, visible=visible, count=count, total=len(self.index))

    def visible_entries(self) -> list[Entry]:
        """Entries currently shown on the surface, in index order."""
        return [self.index[position] for position in self.surface.shown_positions()]
