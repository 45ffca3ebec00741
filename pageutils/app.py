import logging
from datetime import datetime

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware

from .core.config import Config
from .core.errors import DecodeError
from .core.middleware import attach_host_context, global_exception_handler, request_context
from .core.validation import (
    is_chinese_id_card_number,
    is_id_card_new,
    is_id_card_old,
    is_license_plate_number,
    is_mobile_number,
)
from .services.env import os_env
from .services.query import filter_empty_params, parse_query

logger = logging.getLogger(__name__)

VALIDATORS = {
    "id_card": is_id_card_new,
    "id_card_old": is_id_card_old,
    "chinese_id_card": is_chinese_id_card_number,
    "license_plate": is_license_plate_number,
    "mobile": is_mobile_number,
}

# Initialize FastAPI
app = FastAPI(title="Page Utilities API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.allowed_origins(),
    allow_credentials=True,
    allow_methods=["GET", "OPTIONS"],
    allow_headers=["*"],
)

@app.middleware("http")
async def _attach_host_context(request, call_next):
    return await attach_host_context(request, call_next)

@app.exception_handler(Exception)
async def _global_exception_handler(request, exc):
    return await global_exception_handler(request, exc)


@app.get("/env")
async def detect_env(request: Request):
    """Detected OS / app family of the caller's User-Agent."""
    env = getattr(request.state, "os_env", None) or os_env(request_context(request))
    return env.to_dict()


@app.get("/query")
async def inspect_query(request: Request):
    """Parse the request's own query string, raw and with empty values dropped."""
    context = request_context(request)
    try:
        query = parse_query(context=context)
    except DecodeError as e:
        logger.warning(f"Rejected query string {request.url.query!r}: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return {
        "query": query,
        "filtered": filter_empty_params(query),
    }


@app.get("/validate/{kind}")
async def validate(kind: str, value: str = ""):
    """Run one of the validators against ``value``."""
    validator = VALIDATORS.get(kind)
    if validator is None:
        raise HTTPException(status_code=404, detail=f"Unknown validator: {kind}. Allowed: {', '.join(VALIDATORS)}")

    result = validator(value)
    return {
        "kind": kind,
        "value": value,
        "valid": bool(result),
    }


@app.get("/health")
async def health_check():
    """Configuration check for the service."""
    try:
        Config.validate()
        return {
            "status": "healthy",
            "service": "page-utilities-api",
            "timestamp": datetime.now().isoformat(),
        }
    except ValueError as e:
        logger.error(f"Health check failed: {str(e)}")
        return {
            "status": "unhealthy",
            "service": "page-utilities-api",
            "timestamp": datetime.now().isoformat(),
            "error": str(e),
        }


@app.get("/")
async def root():
    """Return basic API information."""

    return {
        "service": "Page Utilities API",
        "version": "1.0",
        "endpoints": {
            "env": "/env",
            "query": "/query",
            "validate": "/validate/{kind}",
            "health": "/health"
        },
        "timestamp": datetime.now().isoformat(),
        "description": "Inspect query strings, user agents and form values with the page helpers"
    }
