import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from pokedeck.api import decks_router, health_router, matches_router, metagame_router
from pokedeck.config import settings
from pokedeck.models.failure import FailureResponse, KnownError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logger.info("%s started", settings.app_name)
    yield


async def known_error_handler(_request: Request, exc: KnownError) -> JSONResponse:
    """Render known failures as the failure envelope with their status code."""
    logger.info("Known failure (%s): %s", exc.kind.value, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_response().model_dump(mode="json"),
    )


async def unknown_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """Anything that escapes a route still gets the failure envelope, never a bare 500."""
    logger.exception("Unhandled %s", type(exc).__name__)
    response = FailureResponse.unknown_failure(detail=type(exc).__name__)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=response.model_dump(mode="json"),
    )


def register_exception_handlers(target: FastAPI) -> None:
    target.add_exception_handler(KnownError, known_error_handler)  # type: ignore[arg-type]
    target.add_exception_handler(Exception, unknown_error_handler)


app = FastAPI(
    title=settings.app_name,
    version=pkg_version("pokedeck"),
    debug=settings.debug,
    lifespan=lifespan,
)

register_exception_handlers(app)

app.include_router(decks_router)
app.include_router(health_router)
app.include_router(matches_router)
app.include_router(metagame_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
