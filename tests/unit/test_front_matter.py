"""Unit tests for YAML front matter reading."""

from datetime import date

import pytest

from sieve.contexts.indexing import FrontMatterError
from sieve.contexts.indexing.front_matter import read_front_matter, split_front_matter


@pytest.mark.unit
class TestSplitFrontMatter:
    def test_mapping_and_body(self):
        text = "---\ntitle: Alpha Guide\ntags: [python]\n---\n\nBody text\n"
        front_matter, body = split_front_matter(text)

        assert front_matter["title"] == "Alpha Guide"
        assert front_matter["tags"] == ["python"]
        assert body == "\nBody text\n"

    def test_unquoted_date_loads_as_date(self):
        front_matter, _ = split_front_matter("---\ntitle: A\ndate: 2025-10-16\n---\n")
        assert front_matter["date"] == date(2025, 10, 16)

    def test_windows_line_endings(self):
        front_matter, body = split_front_matter("---\r\ntitle: Alpha Guide\r\n---\r\nBody")
        assert front_matter["title"] == "Alpha Guide"
        assert body == "Body"

    def test_byte_order_mark(self):
        front_matter, _ = split_front_matter("\ufeff---\ntitle: Alpha Guide\n---\n")
        assert front_matter["title"] == "Alpha Guide"

    def test_missing_block(self):
        with pytest.raises(FrontMatterError, match="no front matter"):
            split_front_matter("# Just a heading\n")

    def test_invalid_yaml(self):
        with pytest.raises(FrontMatterError, match="not valid YAML") as exc_info:
            split_front_matter("---\ntitle: [unclosed\n---\n")
        assert exc_info.value.snippet == "title: [unclosed"

    def test_non_mapping_block(self):
        with pytest.raises(FrontMatterError, match="must be a mapping"):
            split_front_matter("---\n- a\n- b\n---\n")


@pytest.mark.unit
class TestReadFrontMatter:
    def test_slug_defaults_to_file_stem(self, tmp_path):
        post = tmp_path / "alpha-guide.md"
        post.write_text("---\ntitle: Alpha Guide\n---\nBody\n", encoding="utf-8")

        assert read_front_matter(post)["slug"] == "alpha-guide"

    def test_explicit_slug_kept(self, tmp_path):
        post = tmp_path / "2025-10-16-alpha.md"
        post.write_text("---\ntitle: Alpha Guide\nslug: alpha\n---\n", encoding="utf-8")

        assert read_front_matter(post)["slug"] == "alpha"

    def test_error_names_the_post(self, tmp_path):
        post = tmp_path / "broken.md"
        post.write_text("no front matter here", encoding="utf-8")

        with pytest.raises(FrontMatterError) as exc_info:
            read_front_matter(post)
        assert exc_info.value.source_path == post

    def test_non_utf8_post(self, tmp_path):
        post = tmp_path / "cafe.md"
        post.write_bytes(b"---\ntitle: Caf\xe9\n---\n")

        with pytest.raises(FrontMatterError, match="not valid UTF-8") as exc_info:
            read_front_matter(post)
        assert exc_info.value.source_path == post
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)
