from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from app.api import fight
from app.core.config import settings
from app.services.fight import FightService, load_fight_service
from app.utils.exception_handlers import (
    general_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)


@asynccontextmanager
async def app_lifespan(app: FastAPI) -> AsyncGenerator[None]:
    if app.state.fight_service is None:
        logger.warning("No fight service configured, fight routes will answer 503")
    yield


def create_app(fight_service: FightService | None = None) -> FastAPI:
    """
    Build the Fight API application.

    Args:
        fight_service: The service the endpoints delegate to. When omitted, it is
            loaded from the FIGHT_SERVICE setting if one is set.

    Returns:
        The configured FastAPI app.
    """
    if fight_service is None and settings.fight_service:
        fight_service = load_fight_service(settings.fight_service)

    app = FastAPI(
        title="Fight API",
        description="This API allows a hero and a villain to fight",
        version="1.0",
        lifespan=app_lifespan,
    )
    app.state.fight_service = fight_service

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(fight.router, prefix="/api")

    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, general_exception_handler)

    return app


app = create_app()
