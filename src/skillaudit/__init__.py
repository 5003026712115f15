"""
skillaudit - 技能文档与插件清单校验

核心概念:
- AuditConfig: 校验目标目录与规则参数
- ResultReporter: 累积 pass/fail 事件并输出汇总
- Auditor: 主类，依次校验 plugin.json 与 skills/*/SKILL.md

Example:
    >>> from skillaudit import Auditor, AuditConfig, ResultReporter
    >>>
    >>> config = AuditConfig("./apple-intelligence-skills")
    >>> reporter = ResultReporter()
    >>> ok = Auditor(config, reporter).run()
    >>> reporter.failed_count
    0
"""

from skillaudit.core import AuditConfig, Auditor, ResultReporter

__version__ = "0.1.0"
__all__ = ["AuditConfig", "Auditor", "ResultReporter"]
