"""
skillaudit Core - 核心模块
"""

from skillaudit.core.config import AuditConfig, discover_config, load_config
from skillaudit.core.reporter import ReporterState, ResultReporter
from skillaudit.core.auditor import Auditor

__all__ = [
    # 配置
    "AuditConfig",
    "discover_config",
    "load_config",
    # 核心
    "Auditor",
    "ResultReporter",
    "ReporterState",
]
