import logging

from fastapi import FastAPI
from fastapi.openapi.utils import get_openapi

from profile_parser import config
from profile_parser.api.routes.parse import router as parse_router

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="Profile Parser (LinkedIn Export Import)",
    description="Deterministic parser that pre-fills profile fields from an exported LinkedIn profile (PDF/DOCX/TXT)",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

app.include_router(parse_router)

@app.get("/", tags=["health"])
def root():
    return {"service": "profile-parser", "status": "running"}

@app.get("/health", tags=["health"])
def health():
    return {"status": "ok"}

def custom_openapi():
    """Generate OpenAPI schema with custom settings."""
    if app.openapi_schema:
        return app.openapi_schema
    openapi_schema = get_openapi(
        title="Profile Parser API",
        version="0.1.0",
        description="LinkedIn profile export parsing with a 0-4 completeness score",
        routes=app.routes,
    )
    app.openapi_schema = openapi_schema
    return app.openapi_schema

app.openapi = custom_openapi
