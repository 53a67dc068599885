import logging

from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware

from app.config import get_settings, Settings
from app.api.v1.endpoints import matching
from app.matching.scoring import DIMENSION_WEIGHTS

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Deterministic brief-to-provider matching and scoring engine",
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(matching.router, prefix="/api/v1")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint. The engine has no backing services."""
    return {
        "status": "healthy",
        "components": {
            "api": "healthy",
            "matching": "healthy",
        },
        "version": settings.app_version,
        "algorithm_version": settings.algorithm_version,
    }


@app.get("/config")
async def get_config(settings: Settings = Depends(get_settings)):
    """Get application configuration (non-sensitive values)."""
    return {
        "app_name": settings.app_name,
        "app_version": settings.app_version,
        "app_env": settings.app_env,
        "matching": {
            "algorithm_version": settings.algorithm_version,
            "default_max_results": settings.default_max_results,
            "high_importance_criterion_weight": settings.high_importance_criterion_weight,
            "min_keyword_length": settings.min_keyword_length,
            "weights": DIMENSION_WEIGHTS,
        },
    }
