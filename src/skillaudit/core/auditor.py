"""
Auditor - 校验主流程

先校验清单，再校验所有技能文档，最后输出汇总。
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from skillaudit.core.config import AuditConfig
from skillaudit.core.reporter import ResultReporter
from skillaudit.core.rules import validate_manifest, validate_skills

DEFAULT_TITLE = "Apple Intelligence Skills - Test Suite"


class Auditor:
    """
    校验主类

    Example:
        >>> config = AuditConfig("./apple-intelligence-skills")
        >>> auditor = Auditor(config)
        >>> ok = auditor.run()
    """

    def __init__(
        self,
        config: AuditConfig | str | Path,
        reporter: Optional[ResultReporter] = None,
        title: str = DEFAULT_TITLE,
    ):
        """
        Args:
            config: AuditConfig 实例或校验根目录
            reporter: 结果累积器，默认输出到 stdout
            title: 报告标题
        """
        if isinstance(config, (str, Path)):
            config = AuditConfig(config)
        self.config = config
        self.reporter = reporter or ResultReporter()
        self.title = title

    def run(self) -> bool:
        """
        执行全部校验

        Returns:
            全部通过时返回 True
        """
        logger.info(f"开始校验: {self.config.root_dir}")
        self.reporter.banner(self.title)

        validate_manifest(self.config, self.reporter)
        validate_skills(self.config, self.reporter)

        return self.reporter.finalize()

    def __repr__(self) -> str:
        return f"Auditor({self.config.root_dir})"
