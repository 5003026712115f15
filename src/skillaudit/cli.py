"""
skillaudit 命令行入口

Usage:
    skillaudit                       # 校验当前目录
    skillaudit --root ./my-plugin    # 校验指定目录
    skillaudit --config audit.json   # 使用配置文件
    skillaudit --strict-hosts        # 链接按主机名精确匹配
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

from loguru import logger

from skillaudit import __version__
from skillaudit.core import Auditor, ResultReporter, discover_config, load_config
from skillaudit.core.rules import AuditError

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_CONFIG = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skillaudit",
        description="Validate skills/*/SKILL.md documents and the plugin manifest.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=None,
        help="directory to audit (default: current directory)",
    )
    parser.add_argument(
        "--config", type=Path, default=None, help="JSON configuration file"
    )
    parser.add_argument(
        "--strict-hosts",
        action="store_true",
        help="match link hostnames exactly instead of by substring",
    )
    parser.add_argument(
        "--no-color", action="store_true", help="disable coloured output"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="show debug logging on stderr"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def configure_logging(verbose: bool) -> None:
    """日志只写到 stderr，stdout 留给校验记录"""
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    root = args.root if args.root is not None else Path.cwd()
    try:
        if args.config is not None:
            config = load_config(args.config, root_dir=args.root)
        else:
            config = discover_config(root)
    except AuditError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_CONFIG

    if args.strict_hosts:
        config = replace(config, strict_hosts=True)

    reporter = ResultReporter(color=False if args.no_color else None)
    ok = Auditor(config, reporter).run()
    return EXIT_OK if ok else EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
