from __future__ import annotations

import logging
from typing import TextIO

from src.calculation.errors import CalculationError
from src.calculation.evaluator import evaluate


logger = logging.getLogger(__name__)

PROMPT = "Enter an expression"
EXIT_COMMAND = "exit"


def format_result(value: float) -> str:
    """2+2 prints as `4`, not `4.0`."""
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


def run_repl(stdin: TextIO, stdout: TextIO, max_length: int) -> None:
    """
    Interactive loop: one expression per line until `exit` or end of input.
    """
    while True:
        stdout.write(f"{PROMPT}\n")
        stdout.flush()

        line = stdin.readline()
        if line == "":
            logger.info("👋 [REPL] end of input, session closed")
            return

        text = line.strip()
        if text == EXIT_COMMAND:
            stdout.write("Bye\n")
            logger.info("👋 [REPL] session closed by user")
            return

        if len(text) > max_length:
            stdout.write(f"Expression is too long (limit {max_length} characters)\n")
            continue

        try:
            result = evaluate(text)
        except CalculationError as e:
            logger.debug(f"[REPL] {text!r} failed: {e.kind.value}")
            stdout.write(f'Calculation of "{text}" failed: {e.message}\n')
            continue

        stdout.write(f"{text} = {format_result(result)}\n")
