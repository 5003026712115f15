"""
ResultReporter - 校验结果汇总

累积每一次 pass/fail 事件，逐行输出校验记录，并在结束时输出汇总。
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO

from loguru import logger

from .rules.errors import ReporterError
from .rules.models import Outcome, ValidationEvent

RULE_WIDTH = 50


class Colors:
    """终端颜色"""

    GREEN = "\x1b[32m"
    RED = "\x1b[31m"
    YELLOW = "\x1b[33m"
    RESET = "\x1b[0m"
    BOLD = "\x1b[1m"


class ReporterState(str, Enum):
    ACCUMULATING = "accumulating"
    FINALIZED = "finalized"


class ResultReporter:
    """
    校验结果累积器

    由入口显式创建并传递给各个校验器，一次运行只使用一个实例，
    finalize() 之后不可再记录事件。

    Example:
        >>> reporter = ResultReporter()
        >>> reporter.passed("plugin.json exists")
        >>> reporter.failed("foo/SKILL.md exists", "File not found")
        >>> ok = reporter.finalize()
    """

    def __init__(self, output: Optional[TextIO] = None, color: Optional[bool] = None):
        """
        Args:
            output: 输出流，默认 sys.stdout
            color: 是否输出颜色，None 表示仅在终端中启用
        """
        self.output = output or sys.stdout
        if color is None:
            isatty = getattr(self.output, "isatty", None)
            color = bool(isatty and isatty())
        self.color = color

        self.state = ReporterState.ACCUMULATING
        self.total = 0
        self.passed_count = 0
        self.failed_count = 0
        self.events: list[ValidationEvent] = []
        self.failures: list[ValidationEvent] = []

    # === 输出辅助 ===

    def _print(self, *args, **kwargs) -> None:
        print(*args, file=self.output, **kwargs)

    def _paint(self, text: str, code: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{Colors.RESET}"

    def _ensure_accumulating(self) -> None:
        if self.state is ReporterState.FINALIZED:
            raise ReporterError("结果已汇总，不能继续记录")

    # === 记录 ===

    def banner(self, title: str) -> None:
        """输出标题"""
        self._ensure_accumulating()
        self._print(self._paint(title, Colors.BOLD))
        self._print("=" * RULE_WIDTH)

    def section(self, name: str) -> None:
        """输出分节标题"""
        self._ensure_accumulating()
        self._print()
        self._print(self._paint(name, Colors.BOLD))

    def passed(self, label: str) -> None:
        """记录一次通过"""
        self._ensure_accumulating()
        self.total += 1
        self.passed_count += 1
        self.events.append(ValidationEvent(Outcome.PASS, label))
        self._print(f"  {self._paint('✓', Colors.GREEN)} {label}")

    def failed(self, label: str, reason: str) -> None:
        """记录一次失败"""
        self._ensure_accumulating()
        self.total += 1
        self.failed_count += 1
        event = ValidationEvent(Outcome.FAIL, label, reason)
        self.events.append(event)
        self.failures.append(event)
        self._print(f"  {self._paint('✗', Colors.RED)} {label}")
        logger.debug(f"校验失败: {label} ({reason})")

    # === 汇总 ===

    @property
    def ok(self) -> bool:
        return self.failed_count == 0

    def finalize(self) -> bool:
        """
        输出汇总并结束记录

        Returns:
            全部通过时返回 True
        """
        self._ensure_accumulating()
        self.state = ReporterState.FINALIZED

        self._print()
        self._print("=" * RULE_WIDTH)
        self._print(self._paint("Summary", Colors.BOLD))
        self._print(f"  Total:  {self.total}")
        self._print(f"  {self._paint(f'Passed: {self.passed_count}', Colors.GREEN)}")

        if self.failed_count > 0:
            self._print(f"  {self._paint(f'Failed: {self.failed_count}', Colors.RED)}")
            self._print()
            self._print("Failures:")
            for failure in self.failures:
                self._print(f"  {self._paint('✗', Colors.RED)} {failure.label}")
                self._print(f"    {self._paint(f'→ {failure.reason}', Colors.YELLOW)}")
            logger.info(f"校验完成: {self.failed_count}/{self.total} 项失败")
            return False

        self._print()
        self._print(self._paint("All tests passed!", Colors.GREEN))
        logger.info(f"校验完成: {self.total} 项全部通过")
        return True

    def __repr__(self) -> str:
        return (
            f"ResultReporter(total={self.total}, passed={self.passed_count}, "
            f"failed={self.failed_count}, state={self.state.value})"
        )
