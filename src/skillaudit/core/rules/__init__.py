"""Validation rules for skill documents and the plugin manifest."""

from .errors import AuditError, ConfigError, ParseError, ReporterError
from .frontmatter import extract_links, find_skill_md, parse_frontmatter, read_document
from .links import DEFAULT_ALLOWED_DOMAINS, DomainAllowList
from .manifest import load_manifest, validate_manifest
from .models import Hyperlink, Manifest, Outcome, SkillDocument, ValidationEvent
from .skills import discover_skills, validate_skill, validate_skills

__all__ = [
    "AuditError",
    "ConfigError",
    "ParseError",
    "ReporterError",
    "extract_links",
    "find_skill_md",
    "parse_frontmatter",
    "read_document",
    "DEFAULT_ALLOWED_DOMAINS",
    "DomainAllowList",
    "load_manifest",
    "validate_manifest",
    "Hyperlink",
    "Manifest",
    "Outcome",
    "SkillDocument",
    "ValidationEvent",
    "discover_skills",
    "validate_skill",
    "validate_skills",
]
