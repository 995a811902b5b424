import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api import analysis_router
from .core import settings, setup_logging, validate_settings
from .scoring import list_roles

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    setup_logging()
    validate_settings()

    app = FastAPI(title=settings.PROJECT_NAME)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(analysis_router, prefix=settings.API_PREFIX)

    logger.info(f"Available job roles: {', '.join(list_roles())}")
    return app


app = create_app()
