"""
Session logging setup shared by the front ends.

A search session with --verbose gets a DEBUG file log (every filtering pass)
opened by a header naming the command and content source. Without a session
log only warnings reach the console. Context-prefixed wrappers live in
contexts/{context}/logger.py.
"""

import sys
from pathlib import Path

from loguru import logger

FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <7} | {message}"
CONSOLE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | <level>{level: <7}</level> | <level>{message}</level>"


def setup_logger(
    context_name: str,
    log_dir: Path,
    session_info: dict = None,
    console: bool = True,
) -> Path:
    """
    Open a session log for a context.

    Replaces every existing sink with a DEBUG file sink at
    <log_dir>/<context_name>.log and, when console is set, an INFO sink on
    stdout. The log opens with a session header.

    Args:
        context_name: Context identifier, used as the log file name (e.g., "filter")
        log_dir: Directory for this search session
        session_info: Extra header lines, e.g. {"Content source": "content/posts"}
        console: Also log INFO and above to stdout (off for full-screen front ends)

    Returns:
        Path to log file
    """
    log_dir.mkdir(exist_ok=True, parents=True)
    log_file = log_dir / f"{context_name}.log"

    logger.remove()
    logger.add(log_file, format=FILE_FORMAT, level="DEBUG")
    if console:
        logger.add(sys.stdout, format=CONSOLE_FORMAT, level="INFO", colorize=True)

    _log_session_header(session_info or {})

    return log_file


def setup_quiet_logger(console: bool = True) -> None:
    """
    Configure loguru for runs without a session log: warnings to stderr only.

    With console=False every sink is dropped, for full-screen front ends where
    log lines would interleave with the redrawn listing.
    """
    logger.remove()
    if console:
        logger.add(sys.stderr, format="<level>{level: <7}</level> | {message}", level="WARNING")


def _log_session_header(session_info: dict) -> None:
    logger.info("=" * 80)
    logger.info(f"Command: {' '.join(sys.argv)}")
    logger.info(f"Working directory: {Path.cwd()}")
    for key, value in session_info.items():
        logger.info(f"{key}: {value}")
    logger.info("=" * 80)
