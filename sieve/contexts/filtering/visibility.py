"""
Visibility rendering for the Filtering context.

The presentation surface holds one shown/hidden flag per indexed entry,
addressed by index position. Every surface starts fully visible, which is the
unfiltered default the page shows before any input arrives.
"""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from sieve.contexts.indexing.entry import Entry


class PresentationSurface(ABC):
    """Per-entry visibility flags exposed to the presentation layer."""

    @abstractmethod
    def set_shown(self, position: int, shown: bool) -> None:
        """Mark the entry at position as shown or hidden."""

    @abstractmethod
    def is_shown(self, position: int) -> bool:
        """Whether the entry at position is currently shown."""

    @abstractmethod
    def __len__(self) -> int:
        """Number of entries on the surface."""

    def shown_positions(self) -> list[int]:
        return [position for position in range(len(self)) if self.is_shown(position)]


class InMemorySurface(PresentationSurface):
    """
    Surface backed by a list of flags.

    Records how many times each position was written so callers can check that
    a render pass touched every entry exactly once.
    """

    def __init__(self, size: int):
        self._shown = [True] * size
        self.write_counts = [0] * size

    def set_shown(self, position: int, shown: bool) -> None:
        self._shown[position] = shown
        self.write_counts[position] += 1

    def is_shown(self, position: int) -> bool:
        return self._shown[position]

    def __len__(self) -> int:
        return len(self._shown)


class VisibilityRenderer:
    """
    Applies match verdicts to a presentation surface.

    Every call visits every entry exactly once; there is no diffing against the
    previous pass. The Index itself is only read.
    """

    def __init__(self, surface: PresentationSurface):
        self.surface = surface

    def render(self, index: Sequence[Entry], verdicts: Sequence[bool]) -> None:
        """
        Show entries whose verdict is True, hide the rest.

        Args:
            index: The Index being filtered
            verdicts: One verdict per entry, in index order

        Raises:
            ValueError: If verdicts, index and surface disagree in length
        """
        if len(verdicts) != len(index) or len(self.surface) != len(index):
            raise ValueError(
                f"Length mismatch: {len(index)} entries, {len(verdicts)} verdicts, "
                f"surface of {len(self.surface)}"
            )

        for position, verdict in enumerate(verdicts):
            self.surface.set_shown(position, bool(verdict))
