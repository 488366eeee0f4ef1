"""
FastAPI app assembly: logging, middleware, error handlers and router wiring.
"""
import logging
import os
from collections import defaultdict
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse

from planner import __version__
from planner.errors import ClientError

# Configure logging
LOG_LEVEL_NAME = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_LEVEL = getattr(logging, LOG_LEVEL_NAME, logging.INFO)
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)
logger.setLevel(LOG_LEVEL)
logger.info("app_startup: log_level=%s", LOG_LEVEL_NAME)

from planner.api.trips import router as trips_router
from planner.api.participants import router as participants_router
from planner.api.activities import router as activities_router
from planner.api.links import router as links_router

# Database schema is managed by Alembic migrations.

app = FastAPI(
    title="plann.er Trip Planning Service",
    description="API for planning trips: destinations, guests, activities and links.",
    version=__version__,
)

# Avoid implicit trailing-slash redirects for predictable URLs
app.router.redirect_slashes = False

DEFAULT_CORS_ORIGINS = [
    "http://localhost",
    "http://localhost:3000",
    "http://localhost:8081",
]


def _cors_origins() -> list[str]:
    raw = os.getenv("CORS_ORIGINS", "")
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or DEFAULT_CORS_ORIGINS


app.add_middleware(
    CORSMiddleware,
    allow_origins=_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ClientError)
async def client_error_handler(request: Request, exc: ClientError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    errors = defaultdict(list)
    for error in exc.errors():
        # drop the leading 'body'/'path'/'query' marker
        loc = [str(part) for part in error.get("loc", ())[1:]] or ["__root__"]
        errors[".".join(loc)].append(error.get("msg", "Invalid value"))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": "Invalid input", "errors": dict(errors)},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal server error"},
    )


app.include_router(trips_router)
app.include_router(participants_router)
app.include_router(activities_router)
app.include_router(links_router)


@app.get("/health")
def health_check():
    return {"status": "ok", "service": "planner-service"}
