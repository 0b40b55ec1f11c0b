"""FastAPI Application Entry Point (local development)"""
from contextlib import asynccontextmanager
from typing import AsyncIterator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.infrastructure.config import configure_logging, get_settings
from src.presentation.api.routes import health_routes, user_routes

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """アプリケーションのライフサイクル管理"""
    settings = get_settings()
    logger.info(
        "application_starting",
        service=settings.service_name,
        environment=settings.environment,
        store_backend=settings.store_backend,
    )
    yield
    logger.info("application_shutting_down")


def create_app() -> FastAPI:
    """
    FastAPI アプリケーションを作成

    /users へのリクエストを API Gateway イベントに変換し、
    Lambda と同じディスパッチャで処理する。
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="Users API",
        description="CRUD over a DynamoDB users table",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_routes.router, tags=["Health"])
    app.include_router(user_routes.router, tags=["Users"])

    return app


app = create_app()
