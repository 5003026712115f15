"""Data models for skill and manifest validation."""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Optional


@dataclass(frozen=True)
class Hyperlink:
    """A markdown link `[text](url)` found in a skill document."""

    text: str
    url: str


@dataclass(frozen=True)
class SkillDocument:
    """A SKILL.md file read from one skill directory."""

    name: str
    path: Path
    content: str
    frontmatter: Optional[dict[str, str]]
    links: list[Hyperlink] = field(default_factory=list)

    @property
    def has_frontmatter(self) -> bool:
        return self.frontmatter is not None

    def meta(self, key: str) -> str:
        """Return a frontmatter value, or an empty string when absent."""
        if self.frontmatter is None:
            return ""
        return self.frontmatter.get(key, "")


MANIFEST_FIELDS = ("name", "version", "description")


@dataclass
class Manifest:
    """Properties decoded from plugin.json."""

    name: Any = None
    version: Any = None
    description: Any = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Manifest":
        return cls(
            name=data.get("name"),
            version=data.get("version"),
            description=data.get("description"),
            extra={k: v for k, v in data.items() if k not in MANIFEST_FIELDS},
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary, excluding None values."""
        result: dict[str, Any] = {}
        for key in MANIFEST_FIELDS:
            value = getattr(self, key)
            if value is not None:
                result[key] = value
        result.update(self.extra)
        return result


class Outcome(str, Enum):
    PASS = "pass"
    FAIL = "fail"


@dataclass(frozen=True)
class ValidationEvent:
    """One recorded check outcome."""

    outcome: Outcome
    label: str
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is Outcome.PASS
