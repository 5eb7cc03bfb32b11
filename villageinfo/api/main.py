from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from villageinfo import __version__
from villageinfo.api.dependencies import get_dataset_store, get_generator
from villageinfo.api.exception_handlers import (
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
    village_info_error_handler,
)
from villageinfo.api.middleware import RequestLoggingMiddleware
from villageinfo.api.routes.locations import router as locations_router
from villageinfo.api.routes.suggestions import router as suggestions_router
from villageinfo.api.routes.villages import router as villages_router
from villageinfo.api.schemas import HealthResponse
from villageinfo.config import settings
from villageinfo.errors import VillageInfoError
from villageinfo.logging_config import setup_logging
from villageinfo.services.dataset import DatasetStore
from villageinfo.services.generator import TextGenerator
from villageinfo.services.metrics import metrics

logger = logging.getLogger("villageinfo")

_DESCRIPTION = """\
Rural village facility lookup and development suggestions.

Facility records are read from one CSV file per state. Location names
are matched case-insensitively with surrounding whitespace ignored.

The `/gemini*` endpoints forward the village and its facilities to an
external generative-language model and return its suggestions, sector
scores, or a simulated 2019-2023 progress trend.
"""

_OPENAPI_TAGS = [
    {"name": "system", "description": "Liveness, health and metrics."},
    {"name": "villages", "description": "Facility lookup for a single village."},
    {
        "name": "locations",
        "description": "Cascading state / district / block / village pickers.",
    },
    {
        "name": "suggestions",
        "description": "LLM-generated suggestions, scores and progress trends.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level, settings.log_format)
    store = get_dataset_store()
    if not store.root.is_dir():
        logger.warning("Dataset directory %s does not exist", store.root)
    generator = get_generator()
    logger.info(
        "Village Info API starting (datasets=%s, llm=%s)",
        store.root,
        getattr(generator, "provider", None),
    )
    yield


app = FastAPI(
    title="Village Info API",
    version=__version__,
    summary="Village facility lookup and development suggestions",
    description=_DESCRIPTION,
    openapi_tags=_OPENAPI_TAGS,
    lifespan=lifespan,
)

app.add_exception_handler(VillageInfoError, village_info_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(RequestValidationError, validation_exception_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

origins = [o.strip() for o in settings.cors_origins.split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(RequestLoggingMiddleware)

app.include_router(villages_router)
app.include_router(locations_router)
app.include_router(suggestions_router)


@app.get(
    "/",
    tags=["system"],
    summary="Liveness",
    response_class=PlainTextResponse,
)
async def root():
    return "Village Info API is running!"


@app.get(
    "/health",
    tags=["system"],
    summary="Health check",
    description="Report dataset availability and whether an LLM provider is configured.",
    response_model=HealthResponse,
)
def health(
    store: DatasetStore = Depends(get_dataset_store),
    generator: TextGenerator | None = Depends(get_generator),
):
    try:
        states = len(store.list_states())
        status = "ok"
    except VillageInfoError:
        states = 0
        status = "degraded"
    return {
        "status": status,
        "dataset_dir": str(store.root),
        "states": states,
        "generator": getattr(generator, "provider", None),
        "uptime_seconds": metrics.uptime_seconds(),
    }


@app.get(
    "/metrics",
    tags=["system"],
    summary="Application metrics",
    description="Request counters, latency percentiles, dataset cache and upstream stats.",
)
async def get_metrics(store: DatasetStore = Depends(get_dataset_store)):
    snap = metrics.snapshot()
    snap["dataset"]["cache_size"] = store.cache.size
    return snap
