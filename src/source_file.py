"""Load source text from a file with optional YAML front matter."""

from pathlib import Path

import frontmatter

# Front matter keys that preselect models for the comparison
MODEL_KEYS = ("open_source_model", "proprietary_model")


def parse_file(file_path: Path) -> tuple[str, dict]:
    """Parse a markdown or text file with optional YAML front matter.

    Returns:
        (content, metadata) where content is the body text and metadata
        holds only the recognised keys (open_source_model,
        proprietary_model) as strings. If no front matter, metadata is {}.
    """
    post = frontmatter.load(str(file_path))
    content = post.content.strip()
    metadata = {k: str(v) for k, v in post.metadata.items() if k in MODEL_KEYS}
    return content, metadata
