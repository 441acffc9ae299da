"""
YAML front matter reading for Markdown posts.

A post starts with a fenced YAML block:

    ---
    title: Alpha Guide
    tags: [python, tooling]
    date: 2025-10-16
    ---

    Body text...
"""

import re
from pathlib import Path
from typing import Optional

import yaml

from sieve.contexts.indexing.exceptions import FrontMatterError

FRONT_MATTER_PATTERN = re.compile(r"\A\ufeff?---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)", re.DOTALL)


def split_front_matter(text: str, source_path: Optional[Path] = None) -> tuple[dict, str]:
    """
    Split a post into its front matter mapping and body.

    Args:
        text: Full post text
        source_path: Post file (for error messages)

    Returns:
        (front_matter, body) tuple

    Raises:
        FrontMatterError: If the fenced block is missing, is not valid YAML,
            or does not hold a mapping
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        raise FrontMatterError("Post has no front matter block", source_path=source_path)

    raw_block = match.group(1)
    try:
        data = yaml.safe_load(raw_block)
    except yaml.YAMLError as e:
        raise FrontMatterError(
            f"Front matter is not valid YAML: {e}", source_path=source_path, snippet=raw_block
        ) from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise FrontMatterError(
            f"Front matter must be a mapping, got {type(data).__name__}",
            source_path=source_path,
            snippet=raw_block,
        )

    return data, text[match.end() :]


def read_front_matter(post_path: Path) -> dict:
    """
    Read the front matter of a post file.

    The file stem is used as the slug unless the front matter names one.

    Raises:
        FrontMatterError: If the file is not UTF-8 or its front matter is unreadable
    """
    post_path = Path(post_path)
    try:
        text = post_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise FrontMatterError(f"Post is not valid UTF-8: {e}", source_path=post_path) from e

    front_matter, _ = split_front_matter(text, post_path)
    front_matter.setdefault("slug", post_path.stem)
    return front_matter
