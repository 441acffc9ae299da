"""Visible count reporting for the Filtering context."""

from abc import ABC, abstractmethod
from typing import Optional

from sieve.contexts.filtering.visibility import PresentationSurface


class CountDisplay(ABC):
    """Display surface for the single visible-count value."""

    @abstractmethod
    def publish(self, count: int) -> None:
        """Show the current visible count."""


class InMemoryCountDisplay(CountDisplay):
    """Keeps the last published count and how many times it was published."""

    def __init__(self):
        self.value: Optional[int] = None
        self.publish_count = 0

    def publish(self, count: int) -> None:
        self.value = count
        self.publish_count += 1


class CountReporter:
    """
    Counts the entries currently shown on a surface and publishes the number.

    The count is recomputed from the surface on every call so it always equals
    the number of entries the last render pass accepted.
    """

    def __init__(self, surface: PresentationSurface, display: CountDisplay):
        self.surface = surface
        self.display = display

    def count_visible(self) -> int:
        return sum(1 for position in range(len(self.surface)) if self.surface.is_shown(position))

    def report(self) -> int:
        """Compute the visible count, publish it, and return it."""
        count = self.count_visible()
        self.display.publish(count)
        return count
