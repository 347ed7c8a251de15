import logging

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()

from ospa.config import settings
from ospa.core.exceptions import (
    EntityNotFoundException,
    IncompleteCandidateException,
    StoreConnectionException,
)
from ospa.logging_config import configure_logging

# IMPORT ROUTERS
from ospa.routers.candidates import router as candidates_router
from ospa.routers.errors import (
    incomplete_candidate_handler,
    not_found_handler,
    store_unavailable_handler,
    validation_exception_handler,
)
from ospa.routers.health import router as health_router
from ospa.routers.scoring import router as scoring_router

configure_logging()
logger = logging.getLogger(__name__)


# SWAGGER UI - tag display order
_OPENAPI_TAGS = [
    {"name": "Root"},
    {"name": "Health"},
    {"name": "Scoring"},
    {"name": "Candidates"},
]

# FASTAPI APPLICATION CONFIGURATION
app = FastAPI(
    title="OSPA Scorer API",
    description="Accumulative point registry for the Search for Outstanding School Paper Advisers",
    version=settings.APP_VERSION,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=_OPENAPI_TAGS,
)

app.add_middleware(CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"])

# REGISTER EXCEPTION HANDLERS
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(EntityNotFoundException, not_found_handler)
app.add_exception_handler(IncompleteCandidateException, incomplete_candidate_handler)
app.add_exception_handler(StoreConnectionException, store_unavailable_handler)

# REGISTER ROUTERS (order matches _OPENAPI_TAGS / Swagger UI display order)
app.include_router(health_router)       # Health
app.include_router(scoring_router)      # Scoring
app.include_router(candidates_router)   # Candidates


# ROOT ENDPOINT
@app.get("/", tags=["Root"], summary="Root endpoint")
async def root():
    return {
        "service": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "docs": {
            "swagger": "/docs",
            "redoc": "/redoc"
        },
        "sync_enabled": settings.sync_enabled,
        "status": "running"
    }


# RUN WITH UVICORN
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "ospa.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG,
    )
