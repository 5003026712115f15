"""Plugin manifest validation."""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

from .errors import ParseError
from .models import Manifest

if TYPE_CHECKING:
    from ..config.auditconfig import AuditConfig
    from ..reporter import ResultReporter

SECTION_TITLE = "Plugin.json Validation"


def load_manifest(path: Path) -> Manifest:
    """
    Read and decode a manifest file.

    Raises:
        FileNotFoundError: the file does not exist
        ParseError: the content is not a JSON object
    """
    content = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(content)
    except json.JSONDecodeError as exc:
        raise ParseError(str(exc), str(path)) from exc

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}", str(path)
        )
    return Manifest.from_dict(data)


def validate_manifest(config: "AuditConfig", reporter: "ResultReporter") -> None:
    """Check the manifest exists, decodes, and carries name/version/description."""
    reporter.section(SECTION_TITLE)

    path = config.manifest_path
    filename = config.manifest_filename

    if not path.is_file():
        reporter.failed(f"{filename} exists", "File not found")
        return
    reporter.passed(f"{filename} exists")

    try:
        manifest = load_manifest(path)
    except (ParseError, OSError, UnicodeDecodeError) as exc:
        logger.warning(f"清单解析失败 {path}: {exc}")
        reporter.failed(f"{filename} is valid JSON", str(exc))
        return

    if manifest.name == config.expected_name:
        reporter.passed(f"{filename} has correct name")
    elif manifest.name is None:
        reporter.failed(
            f"{filename} has correct name",
            f'Expected "{config.expected_name}", but name is missing',
        )
    else:
        reporter.failed(
            f"{filename} has correct name",
            f'Expected "{config.expected_name}", got "{manifest.name}"',
        )

    if manifest.version:
        reporter.passed(f"{filename} has version: {manifest.version}")
    else:
        reporter.failed(f"{filename} has version", "version is missing")

    if isinstance(manifest.description, str) and manifest.description:
        reporter.passed(f"{filename} has description")
    else:
        reporter.failed(f"{filename} has description", "description is missing or empty")
