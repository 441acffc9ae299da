"""
Filtering context logger.

Provides logging interface for filtering context with automatic [filter] prefix.
All filtering modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from sieve.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[filter]"


def setup_filtering_logger(log_dir: Path, source_path: Path, console: bool = True) -> Path:
    """
    Setup logger for filtering context.

    Args:
        log_dir: Directory for this search session
        source_path: Content source the filter is attached to
        console: Also log INFO and above to stdout

    Returns:
        Path to log file

    Example:
        from sieve.contexts.filtering.logger import setup_filtering_logger

        log_file = setup_filtering_logger(log_dir, source_path=Path("content/posts"))
    """
    return _setup_logger(
        context_name="filter",
        log_dir=log_dir,
        session_info={"Content source": source_path},
        console=console,
    )


# Wrapper functions with automatic [filter] prefix


def _log_info(message: str) -> None:
    """Log info message with [filter] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_warning(message: str) -> None:
    """Log warning message with [filter] prefix."""
    logger.warning(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [filter] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level filtering-specific logging helpers


def log_filter_attached(source_path: Path, entry_count: int) -> None:
    _log_info(f"Filter attached to {source_path} ({entry_count} entries)")


def log_container_missing(source_path: Path) -> None:
    """Log that the content container is absent and the filter stays inert."""
    _log_warning(f"Content container not found at {source_path}; filter is inactive")


def log_filter_pass(query: str, visible_count: int, total: int, elapsed_time: float) -> None:
    """Per-keystroke trace. DEBUG only, so it reaches the file sink but not the console."""
    _log_debug(
        f"query={query!r} visible={visible_count}/{total} ({elapsed_time * 1000:.2f}ms)"
    )
