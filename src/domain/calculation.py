from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class CalculateRequest(BaseModel):
    """计算请求模型"""

    model_config = ConfigDict(extra="ignore")

    expression: str = Field("", description="Arithmetic expression, e.g. 2*(3+4)")

    @field_validator("expression", mode="before")
    @classmethod
    def null_is_empty(cls, v: Any) -> Any:
        # {"expression": null} leaves the field empty, as an absent key does
        return "" if v is None else v


class CalculateResponse(BaseModel):
    """
    Response envelope used for every answer of the calculate endpoint.
    - status: same value as the HTTP status code
    - content: computed value, 0 on error
    - error: error message, empty on success
    - timestamp: Unix epoch seconds at response time
    """

    status: int
    content: float = 0.0
    error: str = ""
    timestamp: int
