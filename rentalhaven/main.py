"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from rentalhaven.api.routes import api_router
from rentalhaven.core.config import settings
from rentalhaven.core.database import Base, engine
from rentalhaven.core.exceptions import register_exception_handlers
from rentalhaven.core.logging import configure_logging

# Import models for Base.metadata.create_all
from rentalhaven.models import property, user  # noqa: F401


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan manager."""
    configure_logging()
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    description="Rental Haven property listing API",
    lifespan=lifespan,
)

# Permissive CORS for local development; tighten before exposing publicly
app.add_middleware(
    CORSMiddleware,  # type: ignore[arg-type]
    allow_origin_regex=settings.CORS_ALLOW_ORIGIN_REGEX,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(api_router, prefix="/api")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "rentalhaven.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
    )
