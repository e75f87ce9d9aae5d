import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_exception_handlers
from app.config import get_settings
from app.database import engine, Base, async_session_maker

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create tables on startup
    async with engine.begin() as conn:
        # Import all models to register them with Base
        from app import models  # noqa: F401
        await conn.run_sync(Base.metadata.create_all)

    if settings.seed_database:
        from app.services.seeder import run_seeders

        async with async_session_maker() as db:
            await run_seeders(db)

    logger.info("Fitness tracker started", extra={"environment": settings.environment})
    yield
    # Cleanup on shutdown
    await engine.dispose()


app = FastAPI(
    title="Fitness Tracker API",
    description="Backend API for training plans and workout execution logs",
    version="0.1.0",
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)


@app.get("/health")
async def health_check():
    return {"status": "healthy", "environment": settings.environment}


# API routers
from app.api.v1.router import api_router

app.include_router(api_router, prefix="/api/v1")
