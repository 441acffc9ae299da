"""
Indexing context logger.

Provides logging interface for indexing context with automatic [index] prefix.
All indexing modules should import from this module, not from loguru directly.
Session sinks are configured by the front end (see filtering.logger).
"""

from pathlib import Path

from loguru import logger

CONTEXT_PREFIX = "[index]"


# Wrapper functions with automatic [index] prefix


def _log_info(message: str) -> None:
    """Log info message with [index] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [index] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [index] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [index] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level indexing-specific logging helpers


def log_source_loaded(source_path: Path, item_count: int, skipped_drafts: int = 0) -> None:
    """Log the content items read from a manifest or posts directory."""
    _log_info(f"Loaded {item_count} content item(s) from {source_path}")
    if skipped_drafts:
        _log_debug(f"  Skipped {skipped_drafts} draft(s)")


def log_undated_entry(title: str, raw_date, position: int) -> None:
    """Log an item whose date could not be read; it stays matchable by title and tags."""
    _log_warning(f"Item {position} ({title!r}) has no usable date: {raw_date!r}")


def log_index_built(entry_count: int, undated_count: int, elapsed_time: float) -> None:
    """Log index construction summary."""
    _log_success(f"Index built: {entry_count} entries ({elapsed_time * 1000:.1f}ms)")
    if undated_count:
        _log_warning(f"  {undated_count} entries without a usable date")
