"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from meal_planner.api.auth import router as auth_router
from meal_planner.api.diary import router as diary_router
from meal_planner.api.pantry import router as pantry_router
from meal_planner.api.planning import router as planning_router
from meal_planner.api.profile import router as profile_router
from meal_planner.api.recipes import public_router
from meal_planner.api.recipes import router as recipes_router
from meal_planner.app_logging import configure_logging
from meal_planner.config import parse_cors_origins
from meal_planner.containers import AppContainer
from meal_planner.services.errors import (
    AuthenticationError,
    ConflictError,
    MealPlannerError,
    NotFoundError,
    PermissionDeniedError,
)

_ERROR_STATUS = {
    NotFoundError: status.HTTP_404_NOT_FOUND,
    ConflictError: status.HTTP_409_CONFLICT,
    PermissionDeniedError: status.HTTP_403_FORBIDDEN,
    AuthenticationError: status.HTTP_401_UNAUTHORIZED,
}


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        logger.info(
            "Starting meal planner: environment=%s", container.settings.environment
        )
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container
    app.add_middleware(
        CORSMiddleware,
        allow_origins=parse_cors_origins(
            container.settings.cors_origins, container.settings.frontend_url
        ),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(MealPlannerError)
    async def handle_service_error(
        request: Request, exc: MealPlannerError
    ) -> JSONResponse:
        status_code = _ERROR_STATUS.get(type(exc), status.HTTP_400_BAD_REQUEST)
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(recipes_router)
    app.include_router(public_router)
    app.include_router(pantry_router)
    app.include_router(planning_router)
    app.include_router(diary_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
