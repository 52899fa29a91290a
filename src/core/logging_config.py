"""
日志配置模块

Root logger setup for the calculator: rotating log file plus optional console
output. The calculation core never logs; the API and REPL layers do.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# 项目根目录（相对路径的 log_dir 基于此解析）
PROJECT_ROOT = Path(__file__).parent.parent.parent


def parse_level(name: str) -> int:
    """Unknown names fall back to INFO."""
    return _LEVELS.get((name or "").strip().upper(), logging.INFO)


def setup_logging(
    log_dir: str = "logs",
    log_file: str = "calc.log",
    max_bytes: int = 10 * 1024 * 1024,  # 10MB
    backup_count: int = 5,
    level: int = logging.INFO,
    console_output: bool = True,
) -> Path:
    """
    配置日志系统

    Args:
        log_dir: log directory; relative paths are resolved against the project root
        log_file: log file name
        max_bytes: size at which the file is rotated
        backup_count: number of rotated files kept
        level: root logger level
        console_output: also log to stderr

    Returns:
        Full path of the log file.
    """
    log_path = PROJECT_ROOT / log_dir
    log_path.mkdir(parents=True, exist_ok=True)
    log_file_path = log_path / log_file

    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # 清除现有的handlers（避免重复添加）
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    file_handler = RotatingFileHandler(
        filename=str(log_file_path),
        maxBytes=max_bytes,
        backupCount=backup_count,
        encoding="utf-8",
    )
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    logger = logging.getLogger(__name__)
    logger.info(f"📝 [日志配置] 日志文件: {log_file_path}")
    logger.info(f"📝 [日志配置] 日志级别: {logging.getLevelName(level)}")
    logger.debug(f"📝 [日志配置] rotation: {max_bytes / 1024 / 1024:.1f}MB x {backup_count}")
    return log_file_path


def setup_logging_from_settings(settings) -> Path:
    """
    从settings配置日志

    Args:
        settings: AppSettings实例
    """
    return setup_logging(
        log_dir=settings.log_dir,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        level=parse_level(settings.log_level),
        console_output=settings.log_console_output,
    )
