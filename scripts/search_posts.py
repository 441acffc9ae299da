#!/usr/bin/env python3
"""
Search the blog's post list from the terminal.

Builds the post index once from a posts directory (Markdown with YAML front
matter) or a YAML manifest, then filters it by title, tags and date.

Commands:
    list         - Show every post in presentation order
    query        - Run one search and show the matching posts
    interactive  - Filter as you type; every keystroke re-runs the search

Usage:
    python scripts/search_posts.py list
    python scripts/search_posts.py query october
    python scripts/search_posts.py query 2025-10 --source content/posts.yaml
    python scripts/search_posts.py interactive --verbose
"""

import codecs
import os
import select
import sys
import termios
import tty
from pathlib import Path
from typing import Callable, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from sieve.contexts.filtering import CountDisplay, PostFilter, QueryInput
from sieve.contexts.filtering.logger import setup_filtering_logger
from sieve.contexts.filtering.query_input import BACKSPACE_KEYS
from sieve.contexts.indexing import Entry, FrontMatterError, InvalidContentItemError
from sieve.utils.logger import setup_quiet_logger
from sieve.utils.text_processing import truncate_display
from sieve.utils.timestamp import now_stamp

load_dotenv()
POSTS_PATH = Path(os.getenv("POSTS_PATH", "content/posts"))
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

TITLE_WIDTH = 48
EXIT_KEYS = ("\r", "\n", "\x04")  # Enter, Ctrl+D
ESCAPE = "\x1b"
ESCAPE_TIMEOUT = 0.05  # seconds to wait for the rest of an escape sequence

app = typer.Typer(
    add_completion=False,
    help="Search the blog's post list by title, tags or date",
    invoke_without_command=True,
)

SourceOption = Annotated[
    Optional[Path],
    typer.Option(
        "--source",
        "-s",
        help="Posts directory or YAML manifest (default: $POSTS_PATH)",
    ),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Write a session log under $LOGS_PATH"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


# =============================================================================
# TERMINAL SURFACES
# =============================================================================


class StatusLineCount(CountDisplay):
    """Publishes the visible count as a status line under the listing."""

    def __init__(self, total: int = 0):
        self.total = total
        self.value: Optional[int] = None

    def publish(self, count: int) -> None:
        self.value = count

    def render(self) -> str:
        noun = "post" if self.total == 1 else "posts"
        return f"{self.value} of {self.total} {noun}"


def format_entry(entry: Entry) -> str:
    """One listing line: date, title, tags."""
    date_column = entry.date_iso or "(undated)"
    title = truncate_display(entry.title, TITLE_WIDTH)
    line = f"  {date_column:<10}  {title:<{TITLE_WIDTH}}"
    if entry.tags:
        line += "  " + ", ".join(f"#{tag}" for tag in entry.tags)
    return line.rstrip()


def print_listing(entries, status: str) -> None:
    for entry in entries:
        typer.echo(format_entry(entry))
    typer.secho(f"\n{status}", fg=typer.colors.BLUE, bold=True)


# =============================================================================
# KEYBOARD INPUT
# =============================================================================


def read_key(read: Callable[[int], str], pending: Callable[[], bool]) -> str:
    """
    Read one key press, keeping escape sequences whole.

    Arrow and function keys arrive as ESC followed by "[" or "O", optional
    parameters and one final byte in the "@".."~" range. They are returned as a
    single string so the caller can ignore them; a lone Esc is returned as-is.

    Args:
        read: Reads the given number of characters ("" at end of input)
        pending: True if more input is already waiting

    Returns:
        The key, or "" at end of input
    """
    key = read(1)
    if key != ESCAPE or not pending():
        return key

    key += read(1)
    if key[-1] in ("[", "O"):
        while True:
            char = read(1)
            key += char
            if not char or "@" <= char <= "~":
                break
    return key


def tty_reader(fd: int) -> Callable[[int], str]:
    """Unbuffered character reader, so select() still sees unread sequence bytes."""
    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    def read(_size: int = 1) -> str:
        while True:
            data = os.read(fd, 1)
            if not data:
                return ""
            char = decoder.decode(data)
            if char:
                return char

    return read


# =============================================================================
# SETUP
# =============================================================================


def attach_filter(source: Optional[Path], verbose: bool, console: bool = True) -> PostFilter:
    """Configure logging and build the filter; exits on unreadable content."""
    source = source if source is not None else POSTS_PATH

    if verbose:
        log_dir = LOGS_PATH / f"search_{now_stamp()}"
        log_file = setup_filtering_logger(log_dir, source_path=source, console=console)
        if console:
            typer.echo(f"Session log: {log_file}")
    else:
        setup_quiet_logger(console=console)

    try:
        post_filter = PostFilter.attach(source, count_display=StatusLineCount())
    except (FrontMatterError, InvalidContentItemError) as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    post_filter.count_display.total = len(post_filter.index)

    if not post_filter.active:
        typer.secho(f"No posts found at {source}", fg=typer.colors.YELLOW, err=True)

    return post_filter


# =============================================================================
# COMMANDS
# =============================================================================


@app.command("list")
def list_command(source: SourceOption = None, verbose: VerboseOption = False):
    """
    Show every post in presentation order.

    Examples:\n

        $ search_posts.py list

        $ search_posts.py list --source content/posts.yaml
    """
    post_filter = attach_filter(source, verbose)
    result = post_filter.apply("")
    print_listing(result.visible, post_filter.count_display.render())


@app.command("query")
def query_command(
    text: Annotated[str, typer.Argument(help="Search text (title, tag, or date)")],
    source: SourceOption = None,
    verbose: VerboseOption = False,
):
    """
    Run one search and show the matching posts.

    Matches are case-insensitive substrings of the title, the tags, the ISO
    date (2025-10-16) or the long-form date (october 16, 2025).

    Examples:\n

        $ search_posts.py query python

        $ search_posts.py query 2025-10

        $ search_posts.py query september
    """
    post_filter = attach_filter(source, verbose)
    result = post_filter.apply(text)

    if not result.count:
        typer.secho(f"No posts match {text.strip()!r}", fg=typer.colors.YELLOW)
        raise typer.Exit(code=1)

    print_listing(result.visible, post_filter.count_display.render())


@app.command("interactive")
def interactive_command(source: SourceOption = None, verbose: VerboseOption = False):
    """
    Filter the post list as you type.

    Every keystroke re-runs the search over the whole list. Backspace deletes,
    Enter or Ctrl+D quits; arrow keys and Esc are ignored. When stdin is not a
    terminal, each input line is taken as the complete search text.
    """
    post_filter = attach_filter(source, verbose, console=False)
    search_box = QueryInput()
    post_filter.bind(search_box)

    def redraw() -> None:
        # Clear screen, cursor home
        typer.echo("\033[2J\033[H", nl=False)
        typer.echo(f"Search: {search_box.text}\n")
        print_listing(post_filter.visible_entries(), post_filter.count_display.render())

    post_filter.apply("")
    redraw()

    if not sys.stdin.isatty():
        for line in sys.stdin:
            search_box.set_text(line.rstrip("\n"))
            redraw()
        return

    fd = sys.stdin.fileno()
    read = tty_reader(fd)

    def pending() -> bool:
        return bool(select.select([fd], [], [], ESCAPE_TIMEOUT)[0])

    saved_attributes = termios.tcgetattr(fd)
    try:
        tty.setcbreak(fd)
        while True:
            key = read_key(read, pending)
            if not key or key in EXIT_KEYS:
                break
            # Escape sequences and other control keys leave the query alone
            if not (key.isprintable() or key in BACKSPACE_KEYS):
                continue
            search_box.type_key(key)
            redraw()
    except KeyboardInterrupt:
        typer.echo()
        raise typer.Exit(code=130)
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved_attributes)

    typer.echo()


if __name__ == "__main__":
    app()
