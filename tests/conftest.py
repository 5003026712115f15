"""
共享测试夹具
"""

import json
from pathlib import Path

import pytest

VALID_SKILL = """---
name: foundation-models
description: "Use the on-device Foundation Models framework."
---

# Foundation Models

## 概要

Generate text on device.

## 公式リファレンス

- [Foundation Models](https://developer.apple.com/documentation/foundationmodels)
- [Swift](https://www.swift.org/documentation/)
"""

VALID_MANIFEST = {
    "name": "apple-intelligence-skills",
    "version": "1.0.0",
    "description": "Skills for Apple Intelligence APIs",
}


@pytest.fixture
def valid_skill() -> str:
    """符合全部规则的 SKILL.md"""
    return VALID_SKILL


@pytest.fixture
def make_plugin(tmp_path: Path):
    """按需构造插件目录"""

    def _make(manifest=VALID_MANIFEST, skills=None) -> Path:
        root = tmp_path / "plugin"
        root.mkdir(exist_ok=True)
        if manifest is not None:
            plugin_dir = root / ".claude-plugin"
            plugin_dir.mkdir(exist_ok=True)
            text = manifest if isinstance(manifest, str) else json.dumps(manifest)
            (plugin_dir / "plugin.json").write_text(text, encoding="utf-8")
        if skills is not None:
            skills_dir = root / "skills"
            skills_dir.mkdir(exist_ok=True)
            for name, content in skills.items():
                skill_dir = skills_dir / name
                skill_dir.mkdir()
                if content is not None:
                    (skill_dir / "SKILL.md").write_text(content, encoding="utf-8")
        return root

    return _make
