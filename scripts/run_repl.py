#!/usr/bin/env python3
# -*- coding: utf-8 -*-

from __future__ import annotations

import sys

from src.core.logging_config import parse_level, setup_logging
from src.core.settings import load_settings
from src.services.repl_service import run_repl


def main() -> None:
    settings = load_settings()
    # console stays clean for the prompt; logs go to the file only
    setup_logging(
        log_dir=settings.log_dir,
        log_file=settings.log_file,
        max_bytes=settings.log_max_bytes,
        backup_count=settings.log_backup_count,
        level=parse_level(settings.log_level),
        console_output=False,
    )
    run_repl(sys.stdin, sys.stdout, settings.max_expression_length)


if __name__ == "__main__":
    main()
