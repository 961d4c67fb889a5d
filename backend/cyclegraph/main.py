import logging
import time

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.exc import OperationalError

from cyclegraph.api.routes import router
from cyclegraph.config import CORS_ORIGINS, LOG_LEVEL
from cyclegraph.db.models import Base
from cyclegraph.db.session import engine

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Service Dependency Cycle Analyzer",
    version="0.1.0",
)

# Middleware FIRST
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes AFTER middleware
app.include_router(router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.on_event("startup")
def startup():
    retries = 5
    delay = 2

    for attempt in range(retries):
        try:
            Base.metadata.create_all(bind=engine)
            logger.info("[DB] Database connected")
            return
        except OperationalError:
            logger.info("[DB] Waiting for database... (%d/%d)", attempt + 1, retries)
            time.sleep(delay)

    # Keep serving; every graph route will report the failure
    logger.warning("[DB] Database not ready - running without persistence")
