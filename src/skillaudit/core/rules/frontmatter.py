"""SKILL.md frontmatter and link extraction."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

from .models import Hyperlink, SkillDocument

SKILL_FILENAME = "SKILL.md"

# Opening marker on the first line, closing marker at the start of a later line.
FRONTMATTER_RE = re.compile(r"\A---[^\n]*\n(.*?)^---", re.DOTALL | re.MULTILINE)
LINK_RE = re.compile(r"\[([^\]]+)\]\((https?://[^)]+)\)")

_QUOTES = ('"', "'")


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] in _QUOTES and value[-1] == value[0]:
        return value[1:-1]
    return value


def parse_frontmatter(content: str) -> Optional[dict[str, str]]:
    """
    Parse the `key: value` block at the head of a document.

    Returns None when there is no `---` delimited block at all, and a
    (possibly empty) dict otherwise. Only the first colon on a line splits
    key from value; one layer of matching quotes is removed from the value.
    A repeated key keeps its last value.
    """
    match = FRONTMATTER_RE.match(content)
    if match is None:
        return None

    metadata: dict[str, str] = {}
    for line in match.group(1).split("\n"):
        colon = line.find(":")
        if colon <= 0:
            continue
        key = line[:colon].strip()
        value = _unquote(line[colon + 1 :].strip())
        metadata[key] = value

    return metadata


def extract_links(content: str) -> list[Hyperlink]:
    """Return every http(s) markdown link in document order."""
    return [Hyperlink(text, url) for text, url in LINK_RE.findall(content)]


def find_skill_md(skill_dir: Path, filename: str = SKILL_FILENAME) -> Optional[Path]:
    """Return the path to the skill document, or None if it does not exist."""
    candidate = Path(skill_dir) / filename
    if candidate.is_file():
        return candidate
    return None


def read_document(skill_dir: Path, filename: str = SKILL_FILENAME) -> SkillDocument:
    """
    Read and parse one skill document.

    Raises:
        FileNotFoundError: the skill directory has no document
        OSError / UnicodeDecodeError: the document could not be read
    """
    skill_dir = Path(skill_dir)
    skill_md = find_skill_md(skill_dir, filename)
    if skill_md is None:
        raise FileNotFoundError(f"{skill_dir.name}/{filename} not found")

    content = skill_md.read_text(encoding="utf-8")
    return SkillDocument(
        name=skill_dir.name,
        path=skill_md,
        content=content,
        frontmatter=parse_frontmatter(content),
        links=extract_links(content),
    )
