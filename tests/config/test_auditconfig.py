"""
AuditConfig 测试
"""

import json
from dataclasses import replace
from pathlib import Path

import pytest

from skillaudit.core.config import AuditConfig, discover_config, load_config
from skillaudit.core.rules import ConfigError, ParseError


class TestAuditConfigPaths:
    """测试 AuditConfig 路径属性"""

    def test_path_properties(self, tmp_path: Path):
        config = AuditConfig(tmp_path)

        assert config.root_dir == tmp_path.resolve()
        assert config.skills_dir == config.root_dir / "skills"
        assert config.manifest_path == config.root_dir / ".claude-plugin" / "plugin.json"
        assert config.manifest_filename == "plugin.json"

    def test_skill_paths(self, tmp_path: Path):
        config = AuditConfig(tmp_path)

        assert config.skill_dir("foo") == config.skills_dir / "foo"
        assert config.skill_md("foo") == config.skills_dir / "foo" / "SKILL.md"

    def test_defaults(self, tmp_path: Path):
        config = AuditConfig(tmp_path)

        assert config.expected_name == "apple-intelligence-skills"
        assert config.allowed_domains == ("developer.apple.com", "swift.org", "apple.com")
        assert config.required_sections == ("## 概要", "## 公式リファレンス")
        assert config.strict_hosts is False

    def test_lists_become_tuples(self, tmp_path: Path):
        config = AuditConfig(tmp_path, allowed_domains=["a.org"], required_sections=["# A"])

        assert config.allowed_domains == ("a.org",)
        assert config.required_sections == ("# A",)

    def test_empty_allow_list_rejected(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            AuditConfig(tmp_path, allowed_domains=[])

    @pytest.mark.parametrize("field", ["allowed_domains", "required_sections"])
    def test_string_sequence_rejected(self, tmp_path: Path, field: str):
        """单个字符串不能代替列表"""
        with pytest.raises(ConfigError, match=field):
            AuditConfig(tmp_path, **{field: "apple.com"})

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_strict_hosts_must_be_bool(self, tmp_path: Path, value):
        with pytest.raises(ConfigError, match="strict_hosts"):
            AuditConfig(tmp_path, strict_hosts=value)

    def test_replace_keeps_values(self, tmp_path: Path):
        config = replace(AuditConfig(tmp_path), strict_hosts=True)

        assert config.strict_hosts is True
        assert config.root_dir == tmp_path.resolve()


class TestAuditConfigSerialization:
    """测试 to_dict / from_dict / load_config"""

    def test_round_trip(self, tmp_path: Path):
        config = AuditConfig(tmp_path, expected_name="other", strict_hosts=True)

        restored = AuditConfig.from_dict(config.to_dict())

        assert restored == config

    def test_unknown_key_rejected(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="nope"):
            AuditConfig.from_dict({"root_dir": str(tmp_path), "nope": 1})

    def test_root_dir_required(self):
        with pytest.raises(ConfigError):
            AuditConfig.from_dict({})

    def test_load_config_defaults_root_to_file_dir(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text(json.dumps({"expected_name": "mine"}), encoding="utf-8")

        config = load_config(path)

        assert config.root_dir == tmp_path.resolve()
        assert config.expected_name == "mine"

    def test_load_config_root_override(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text("{}", encoding="utf-8")
        other = tmp_path / "other"

        assert load_config(path, root_dir=other).root_dir == other.resolve()

    def test_load_config_invalid_json(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text("{", encoding="utf-8")

        with pytest.raises(ParseError):
            load_config(path)

    def test_load_config_string_domains_rejected(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_text(json.dumps({"allowed_domains": "apple.com"}), encoding="utf-8")

        with pytest.raises(ConfigError, match="allowed_domains"):
            load_config(path)

    def test_load_config_not_utf8(self, tmp_path: Path):
        path = tmp_path / "audit.json"
        path.write_bytes(b'{"link_owner": "\xff"}')

        with pytest.raises(ParseError, match="UTF-8"):
            load_config(path)

    def test_load_config_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError):
            load_config(tmp_path / "missing.json")

    def test_discover_config(self, tmp_path: Path):
        assert discover_config(tmp_path) == AuditConfig(tmp_path)

        (tmp_path / "skillaudit.json").write_text(
            json.dumps({"link_owner": "Swift"}), encoding="utf-8"
        )
        assert discover_config(tmp_path).link_owner == "Swift"
