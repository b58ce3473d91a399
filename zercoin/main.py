import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from zercoin import __version__
from zercoin.api import create_api_router
from zercoin.core.config import get_settings
from zercoin.infrastructure.database.session import dispose_engine, init_db

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("%s %s ready (%s)", settings.project_name, __version__, settings.environment)
    yield
    await dispose_engine()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(
        title=settings.project_name,
        description="Wallet ledger with atomic transfers and an append-only audit trail",
        version=__version__,
        lifespan=lifespan,
    )

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", summary="Liveness probe")
    async def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    return app


app = create_app()
