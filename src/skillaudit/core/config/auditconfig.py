"""
AuditConfig - 校验配置数据模型

只负责定义校验目标的目录结构与规则参数，不包含任何校验逻辑。
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Optional

from loguru import logger

from ..rules.errors import ConfigError, ParseError
from ..rules.frontmatter import SKILL_FILENAME
from ..rules.links import DEFAULT_ALLOWED_DOMAINS

DEFAULT_CONFIG_FILENAME = "skillaudit.json"
DEFAULT_EXPECTED_NAME = "apple-intelligence-skills"
DEFAULT_REQUIRED_SECTIONS = ("## 概要", "## 公式リファレンス")


@dataclass
class AuditConfig:
    """
    校验配置

    目录结构：
    root_dir/
    ├── .claude-plugin/
    │   └── plugin.json      # 清单
    └── skills/
        └── <skill-name>/
            └── SKILL.md     # 技能文档
    """

    root_dir: Path
    skills_dirname: str = "skills"
    skill_filename: str = SKILL_FILENAME
    manifest_relpath: str = ".claude-plugin/plugin.json"
    expected_name: str = DEFAULT_EXPECTED_NAME
    allowed_domains: tuple[str, ...] = DEFAULT_ALLOWED_DOMAINS
    required_sections: tuple[str, ...] = DEFAULT_REQUIRED_SECTIONS
    link_owner: str = "Apple"
    strict_hosts: bool = False

    def __post_init__(self):
        self.root_dir = Path(self.root_dir).resolve()

        errors = []
        # 单个字符串会被 tuple() 拆成单字符
        for name in ("allowed_domains", "required_sections"):
            value = getattr(self, name)
            if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
                raise ConfigError(
                    f"无效的校验配置: {name} 必须是字符串列表，实际为 {type(value).__name__}"
                )
        if not isinstance(self.strict_hosts, bool):
            raise ConfigError(
                f"无效的校验配置: strict_hosts 必须是布尔值，"
                f"实际为 {type(self.strict_hosts).__name__}"
            )

        self.allowed_domains = tuple(self.allowed_domains)
        self.required_sections = tuple(self.required_sections)

        if not self.allowed_domains:
            errors.append("allowed_domains 不能为空")
        if any(not d or not isinstance(d, str) for d in self.allowed_domains):
            errors.append("allowed_domains 只能包含非空字符串")
        if any(not s or not isinstance(s, str) for s in self.required_sections):
            errors.append("required_sections 只能包含非空字符串")
        if errors:
            raise ConfigError(f"无效的校验配置: {'; '.join(errors)}", errors)

    # === 目录路径属性 ===

    @property
    def skills_dir(self) -> Path:
        """技能根目录"""
        return self.root_dir / self.skills_dirname

    @property
    def manifest_path(self) -> Path:
        """清单文件路径"""
        return self.root_dir / self.manifest_relpath

    @property
    def manifest_filename(self) -> str:
        return self.manifest_path.name

    # === 辅助方法 ===

    def skill_dir(self, name: str) -> Path:
        """获取特定技能的目录"""
        return self.skills_dir / name

    def skill_md(self, name: str) -> Path:
        """获取特定技能的文档路径"""
        return self.skill_dir(name) / self.skill_filename

    def to_dict(self) -> dict:
        return {
            "root_dir": str(self.root_dir),
            "skills_dirname": self.skills_dirname,
            "skill_filename": self.skill_filename,
            "manifest_relpath": self.manifest_relpath,
            "expected_name": self.expected_name,
            "allowed_domains": list(self.allowed_domains),
            "required_sections": list(self.required_sections),
            "link_owner": self.link_owner,
            "strict_hosts": self.strict_hosts,
        }

    @classmethod
    def from_dict(cls, data: dict, root_dir: Optional[str | Path] = None) -> "AuditConfig":
        """
        从字典构建配置

        Args:
            data: 配置字典，未出现的字段使用默认值
            root_dir: 覆盖字典中的 root_dir
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"未知的配置项: {', '.join(unknown)}")

        values = dict(data)
        if root_dir is not None:
            values["root_dir"] = root_dir
        if "root_dir" not in values:
            raise ConfigError("缺少 root_dir")
        return cls(**values)

    def __repr__(self) -> str:
        return f"AuditConfig({self.root_dir})"


def load_config(path: str | Path, root_dir: Optional[str | Path] = None) -> AuditConfig:
    """
    从 JSON 文件加载配置

    未指定 root_dir 且文件中也没有时，使用配置文件所在目录。
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigError(f"配置文件不存在: {path}")

    try:
        content = path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"配置文件不是合法 UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise ConfigError(f"配置文件读取失败: {e}") from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ParseError(f"配置文件不是合法 JSON: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise ParseError("配置文件顶层必须是对象", str(path))

    if root_dir is None and "root_dir" not in data:
        root_dir = path.parent

    logger.debug(f"加载配置: {path}")
    return AuditConfig.from_dict(data, root_dir=root_dir)


def discover_config(root_dir: str | Path) -> AuditConfig:
    """优先使用 root_dir 下的 skillaudit.json，否则使用默认配置"""
    candidate = Path(root_dir) / DEFAULT_CONFIG_FILENAME
    if candidate.is_file():
        return load_config(candidate, root_dir=root_dir)
    return AuditConfig(root_dir)
