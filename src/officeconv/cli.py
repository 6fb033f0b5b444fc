"""
命令行入口
配置 loguru 日志、加载设置并执行一次目录转换
"""

import argparse
import sys
from pathlib import Path

from loguru import logger

from .batch_pipeline import run_batch_conversion
from .config import Settings, get_settings


def _configure_logging(settings: Settings, level: str | None = None) -> None:
    """配置 loguru 日志"""
    # 移除默认 handler
    logger.remove()

    # 添加控制台输出
    logger.add(
        sys.stderr,
        format=settings.log_format,
        level=level or settings.log_level,
        colorize=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="officeconv",
        description="批量转换目录中的 Office 文档（DOCX -> PDF，XLSX -> CSV）",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
示例:
  officeconv ./documents
  officeconv ./documents --log-level DEBUG
  OFFICECONV_SOURCE_DIR=./documents officeconv
        """,
    )
    parser.add_argument(
        "source_dir",
        nargs="?",
        type=Path,
        default=None,
        help="要扫描的目录（默认使用配置 OFFICECONV_SOURCE_DIR）",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="日志级别（默认: 配置中的 log_level）",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """命令行入口，返回进程退出码"""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
        _configure_logging(settings, args.log_level)
        run_batch_conversion(args.source_dir, settings=settings)
    except Exception:
        logger.exception("转换中断")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
