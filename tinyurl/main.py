from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from tinyurl.core.config import settings
from tinyurl.core.logging_config import configure_logging
from tinyurl.db import database
from tinyurl.db.models import Base
from tinyurl.api import links, web

logger = configure_logging()


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"Application '{settings.PROJECT_NAME}' starting up.")
    Base.metadata.create_all(bind=database.engine)
    logger.info("Database models initialized/checked.")
    database.verify_database_connection()
    yield
    logger.info("Shutting down gracefully...")
    database.engine.dispose()


app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Shorten long, unruly URLs",
    # Kept under /api so /{code} sees every top-level alphanumeric path
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    lifespan=lifespan,
)

app.include_router(links.router, prefix="/api/v1")


@app.get("/health", tags=["health"])
def health_check():
    return {"status": "healthy", "service": "tinyurl"}


# Registered last: "/{code}" would otherwise shadow the routes above
app.include_router(web.router, prefix="")


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})
