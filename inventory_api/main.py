"""
Main FastAPI application
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from inventory_api.config import get_settings
from inventory_api.database import engine, Base
from inventory_api import models  # noqa: F401 - register tables on Base.metadata
from inventory_api.api import categories, items, suppliers
from inventory_api.api.errors import register_error_handlers
from inventory_api.utils.logger import get_logger

settings = get_settings()
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created")

    yield

    await engine.dispose()

app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

# Include routers
app.include_router(categories.router, prefix="/api/categories", tags=["Categories"])
app.include_router(items.router, prefix="/api/items", tags=["Inventory Items"])
app.include_router(suppliers.router, prefix="/api/suppliers", tags=["Suppliers"])


@app.get("/")
async def root():
    return {
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "running"
    }


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "inventory_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
