"""
skillaudit 配置模块

提供校验目标与规则参数的配置能力。
"""

from .auditconfig import (
    DEFAULT_CONFIG_FILENAME,
    AuditConfig,
    discover_config,
    load_config,
)


__all__ = [
    "AuditConfig",
    "DEFAULT_CONFIG_FILENAME",
    "discover_config",
    "load_config",
]
