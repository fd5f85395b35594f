from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from . import __version__
from .config import settings
from .routers import calculators, countries

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("buildcalc")

app = FastAPI(
    title=settings.APP_NAME,
    description="Construction material calculators in metric and imperial units",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(calculators.router, prefix="/api")
app.include_router(countries.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "buildcalc"}


@app.on_event("startup")
def log_startup():
    logger.info("%s %s ready, default country %s", settings.APP_NAME, __version__, settings.DEFAULT_COUNTRY)
