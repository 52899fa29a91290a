from __future__ import annotations

import logging
import time

from pydantic import ValidationError

from src.calculation.errors import CalculationError
from src.calculation.evaluator import evaluate
from src.calculation.lexer import is_valid_expression_char
from src.domain.calculation import CalculateRequest, CalculateResponse


logger = logging.getLogger(__name__)

ERR_ONLY_POST_ALLOWED = "only POST method is allowed"
ERR_FAILED_TO_UNMARSHAL = "failed to unmarshal request"
ERR_EMPTY_REQUEST = "empty expression"
ERR_TOO_LONG = "expression is too long"
ERR_INVALID_CHARS = "expression contains invalid characters"
ERR_INTERNAL = "internal server error"


class RequestRejected(Exception):
    """Request refused before evaluation; carries the HTTP status to answer with."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status
        self.message = message


def decode_request(raw: bytes) -> CalculateRequest:
    """
    Decode the request body. An absent body or a JSON null counts as an empty
    expression; anything that is not a JSON object with a string `expression`
    is rejected with 500, like the original server did.
    """
    if raw.strip() in (b"", b"null"):
        return CalculateRequest()
    try:
        return CalculateRequest.model_validate_json(raw)
    except ValidationError as e:
        logger.info(f"🚫 [计算] undecodable body: {e.error_count()} error(s)")
        raise RequestRejected(500, ERR_FAILED_TO_UNMARSHAL) from e


def validate_expression(expression: str, max_length: int) -> str:
    if expression == "":
        raise RequestRejected(400, ERR_EMPTY_REQUEST)
    if len(expression) > max_length:
        raise RequestRejected(400, ERR_TOO_LONG)
    if not all(is_valid_expression_char(ch) for ch in expression):
        raise RequestRejected(400, ERR_INVALID_CHARS)
    return expression


def calculate(expression: str) -> float:
    """
    Evaluate and log the outcome. CalculationError propagates to the caller.
    """
    try:
        result = evaluate(expression)
    except CalculationError as e:
        logger.info(f"❌ [计算] {expression!r} failed ({e.kind.value}): {e.message}")
        raise
    logger.info(f"✅ [计算] {expression!r} = {result}")
    return result


def success_response(value: float) -> CalculateResponse:
    return CalculateResponse(status=200, content=value, timestamp=int(time.time()))


def error_response(status: int, message: str) -> CalculateResponse:
    return CalculateResponse(status=status, error=message, timestamp=int(time.time()))
