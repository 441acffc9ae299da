"""Custom exceptions for the indexing context with content source references."""

from pathlib import Path
from typing import Optional


class ContentSourceNotFoundError(FileNotFoundError):
    """
    Exception raised when the content container (manifest or posts directory) is absent.

    Attributes:
        source_path: Path that was expected to hold the content items
    """

    def __init__(self, source_path: Path):
        self.source_path = Path(source_path)
        super().__init__(f"Content source not found: {self.source_path}")


class InvalidContentItemError(ValueError):
    """
    Exception raised when a content item cannot become an Entry.

    Attributes:
        message: Error description
        position: Zero-based position of the item in presentation order
        source_path: File the item came from, when known
    """

    def __init__(
        self,
        message: str,
        position: Optional[int] = None,
        source_path: Optional[Path] = None,
    ):
        self.message = message
        self.position = position
        self.source_path = source_path

        parts = [message]

        if position is not None:
            parts.append(f"Item position: {position}")

        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))


class FrontMatterError(ValueError):
    """
    Exception raised when a post's YAML front matter is missing or unreadable.

    Attributes:
        message: Error description
        source_path: Post file that failed to parse
        snippet: Start of the offending front matter block
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        snippet: Optional[str] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.snippet = snippet

        parts = [message]

        if source_path:
            parts.append(f"Post: {source_path}")

        if snippet:
            # Truncate snippet if too long
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"\nFront matter:\n{snippet}")

        super().__init__("\n".join(parts))
