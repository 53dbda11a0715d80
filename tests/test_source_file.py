"""Unit tests for src/source_file.py."""

import textwrap
from pathlib import Path

from src.source_file import parse_file


def test_parse_file_no_frontmatter(tmp_path: Path) -> None:
    """File without frontmatter returns full content and empty metadata."""
    f = tmp_path / "article.md"
    f.write_text("  Rivers carry sediment to the sea.\n", encoding="utf-8")
    content, metadata = parse_file(f)
    assert content == "Rivers carry sediment to the sea."
    assert metadata == {}


def test_parse_file_with_model_frontmatter(tmp_path: Path) -> None:
    f = tmp_path / "article.md"
    f.write_text(
        textwrap.dedent("""\
            ---
            open_source_model: google/pegasus-xsum
            proprietary_model: gpt-4
            ---
            Rivers carry sediment to the sea.
        """),
        encoding="utf-8",
    )
    content, metadata = parse_file(f)
    assert content == "Rivers carry sediment to the sea."
    assert metadata == {"open_source_model": "google/pegasus-xsum", "proprietary_model": "gpt-4"}


def test_parse_file_ignores_unknown_keys(tmp_path: Path) -> None:
    f = tmp_path / "article.md"
    f.write_text("---\ntitle: Rivers\nrounds: 3\n---\nBody text.\n", encoding="utf-8")
    content, metadata = parse_file(f)
    assert content == "Body text."
    assert metadata == {}
