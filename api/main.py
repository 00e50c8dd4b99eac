import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.errors import PyMongoError

from applications import router as applications_router
from auth import router as auth_router
from core import config, db
from core.logging import configure_logging
from payments import router as payments_router
from reviews import router as reviews_router
from scholarships import router as scholarships_router
from stories import router as stories_router
from users import router as users_router
from wishlists import router as wishlists_router

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Open the Mongo client once per process.
    await db.init_client()
    logger.info("mongo_connected db=%s", db.database_name())
    try:
        yield
    finally:
        await db.close_client()


app = FastAPI(lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.env_list("CORS_ORIGINS", DEFAULT_CORS_ORIGINS),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(scholarships_router.router, tags=["scholarships"])
app.include_router(applications_router.router, tags=["applications"])
app.include_router(users_router.router, tags=["users"])
app.include_router(reviews_router.router, tags=["reviews"])
app.include_router(wishlists_router.router, tags=["wishlists"])
app.include_router(stories_router.router, tags=["success-stories"])
app.include_router(payments_router.router, tags=["payments"])
app.include_router(auth_router.router, tags=["auth"])


@app.exception_handler(PyMongoError)
async def store_error_handler(request: Request, exc: PyMongoError) -> JSONResponse:
    # No retries: the request fails as a whole.
    logger.error("store_failed method=%s path=%s error=%s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Database operation failed.", "error": str(exc)},
    )


@app.get("/health")
def health() -> dict:
    return {"status": "OK", "message": "Server is healthy"}


@app.get("/")
def root() -> dict:
    return {"message": "ScholarStream backend is running"}
