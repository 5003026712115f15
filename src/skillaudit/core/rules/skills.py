"""Skill document validation."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .frontmatter import read_document
from .links import DomainAllowList
from .models import SkillDocument

if TYPE_CHECKING:
    from ..config.auditconfig import AuditConfig
    from ..reporter import ResultReporter

SECTION_TITLE = "Skill Files Validation"


def discover_skills(skills_dir: Path) -> list[str]:
    """Return the names of the immediate subdirectories, sorted."""
    return sorted(d.name for d in Path(skills_dir).iterdir() if d.is_dir())


def _check_metadata(doc: SkillDocument, reporter: "ResultReporter") -> None:
    name = doc.meta("name")
    if not name:
        reporter.failed(f"{doc.name} has name in frontmatter", "name is missing")
    else:
        reporter.passed(f"{doc.name} has name: {name}")

    if not doc.meta("description"):
        reporter.failed(f"{doc.name} has description", "description is missing")
    else:
        reporter.passed(f"{doc.name} has description")


def _check_sections(
    doc: SkillDocument, sections: tuple[str, ...], reporter: "ResultReporter"
) -> None:
    for section in sections:
        label = f'{doc.name} has "{section}" section'
        if section in doc.content:
            reporter.passed(label)
        else:
            reporter.failed(label, "Section not found")


def _check_links(
    doc: SkillDocument,
    allow_list: DomainAllowList,
    owner: str,
    reporter: "ResultReporter",
) -> None:
    label = f"{doc.name} uses only {owner} official links"
    for link in doc.links:
        if not allow_list.check(link.url):
            reporter.failed(label, f"Found non-{owner} link: {link.url}")


def validate_skill(
    config: "AuditConfig",
    name: str,
    reporter: "ResultReporter",
    allow_list: DomainAllowList | None = None,
) -> None:
    """Run every per-skill check for one skill directory."""
    if allow_list is None:
        allow_list = DomainAllowList(config.allowed_domains, strict=config.strict_hosts)

    doc_label = f"{name}/{config.skill_filename}"
    try:
        doc = read_document(config.skill_dir(name), config.skill_filename)
    except FileNotFoundError:
        reporter.failed(f"{doc_label} exists", "File not found")
        return
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"技能文档读取失败 {doc_label}: {exc}")
        reporter.passed(f"{doc_label} exists")
        reporter.failed(f"{doc_label} is readable", str(exc))
        return
    reporter.passed(f"{doc_label} exists")

    if doc.has_frontmatter:
        _check_metadata(doc, reporter)
        _check_sections(doc, config.required_sections, reporter)
    else:
        reporter.failed(f"{name} has valid frontmatter", "No frontmatter found")

    _check_links(doc, allow_list, config.link_owner, reporter)


def validate_skills(config: "AuditConfig", reporter: "ResultReporter") -> None:
    """Discover every skill under the skills root and validate each one."""
    reporter.section(SECTION_TITLE)

    skills_dir = config.skills_dir
    if not skills_dir.is_dir():
        reporter.failed(
            f"{config.skills_dirname.capitalize()} directory exists",
            f"{config.skills_dirname}/ directory not found",
        )
        return
    reporter.passed(f"{config.skills_dirname.capitalize()} directory exists")

    names = discover_skills(skills_dir)
    if not names:
        reporter.failed("At least one skill exists", "No skill directories found")
        return
    reporter.passed(f"Found {len(names)} skill(s)")

    allow_list = DomainAllowList(config.allowed_domains, strict=config.strict_hosts)
    logger.debug(f"链接策略: {allow_list!r}")
    for name in names:
        logger.debug(f"检查技能: {name}")
        validate_skill(config, name, reporter, allow_list)
