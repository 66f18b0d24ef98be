"""FastAPI application factory."""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.exceptions import ChatError
from app.infra.logging_config import configure_logging, get_logger
from app.routers.conversations_router import conversations_router
from app.routers.responders_router import router as responders_router
from app.routers.system import router as system_router
from app.routers.users_router import router as users_router

logger = get_logger("api")


async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


def create_app(testing: bool = False) -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ChatError, chat_error_handler)

    app.include_router(system_router)
    app.include_router(users_router)
    app.include_router(responders_router)
    app.include_router(conversations_router)

    if not testing:
        logger.info("Starting %s (%s)", settings.app_name, settings.environment)
    return app


app = create_app()
