"""
skillaudit 快速入门示例

流程:
1. 校验 examples/apple-intelligence-skills（app-intents 含一个非官方链接）
2. 使用 --strict-hosts 风格的配置再校验一次

运行:
    uv run python examples/demo.py
"""

from __future__ import annotations

import argparse
from dataclasses import replace
from pathlib import Path

from skillaudit import AuditConfig, Auditor, ResultReporter

SAMPLE_ROOT = Path(__file__).resolve().parent / "apple-intelligence-skills"


def main() -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument("--root", type=Path, default=SAMPLE_ROOT)
    args = parser.parse_args()

    config = AuditConfig(args.root)

    print("=== 默认策略（子串匹配）===")
    ok = Auditor(config, ResultReporter()).run()

    print("\n=== 主机名精确匹配 ===")
    strict_ok = Auditor(replace(config, strict_hosts=True), ResultReporter()).run()

    return 0 if ok and strict_ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
