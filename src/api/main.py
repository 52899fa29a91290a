from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.core.settings import AppSettings, load_settings
from src.core.logging_config import setup_logging_from_settings
from .routers.v1 import router as v1_router

logger = logging.getLogger(__name__)


def _parse_cors_origins(settings: AppSettings) -> List[str]:
    """解析CORS origins配置，从settings读取"""
    raw = settings.cors_origins
    if not raw or not raw.strip():
        # 默认允许本地开发环境
        return ["http://localhost:3000", "http://127.0.0.1:3000"]
    return [x.strip() for x in raw.split(",") if x.strip()]


def create_app(settings: Optional[AppSettings] = None) -> FastAPI:
    """
    App factory (uvicorn is started with `factory=True`), so importing this
    module has no side effects.
    """
    if settings is None:
        settings = load_settings()
        setup_logging_from_settings(settings)

    app = FastAPI(title="calc", version="0.1.0")
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_parse_cors_origins(settings),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(v1_router, prefix="/api/v1")
    logger.info(f"🚀 [API] calculator app created, max expression length={settings.max_expression_length}")
    return app
