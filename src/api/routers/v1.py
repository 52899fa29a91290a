from __future__ import annotations

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from src.calculation.errors import CalculationError
from src.core.settings import AppSettings
from src.domain.calculation import CalculateResponse
from src.services.calculation_service import (
    ERR_INTERNAL,
    ERR_ONLY_POST_ALLOWED,
    RequestRejected,
    calculate,
    decode_request,
    error_response,
    success_response,
    validate_expression,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _reply(response: CalculateResponse) -> JSONResponse:
    return JSONResponse(status_code=response.status, content=response.model_dump())


@router.get("/health")
def health() -> dict:
    return {"ok": True}


@router.api_route("/calculate", methods=["GET", "POST", "PUT", "PATCH", "DELETE"], response_model=CalculateResponse)
async def calculate_expression(request: Request) -> JSONResponse:
    """
    计算表达式

    Body: {"expression": "2*(3+4)"}. Every answer, including errors, uses the
    CalculateResponse envelope and its `status` matches the HTTP status.
    """
    # 只允许POST，其他方法不读取请求体
    if request.method != "POST":
        return _reply(error_response(405, ERR_ONLY_POST_ALLOWED))

    settings: AppSettings = request.app.state.settings
    try:
        payload = decode_request(await request.body())
        expression = validate_expression(payload.expression, settings.max_expression_length)
        logger.info(f"📨 [API] 收到计算请求: expression={expression[:50]!r}")
        return _reply(success_response(calculate(expression)))
    except RequestRejected as e:
        logger.info(f"🚫 [API] 请求被拒绝 ({e.status}): {e.message}")
        return _reply(error_response(e.status, e.message))
    except CalculationError as e:
        return _reply(error_response(400, e.message))
    except Exception as e:
        logger.error(f"❌ [API错误] 计算接口错误: {e}", exc_info=True)
        return _reply(error_response(500, ERR_INTERNAL))
