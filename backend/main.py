from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from api import active_domains, domains, recipients
from config.app_config import APP_CONFIG
from constants import APIConfig
from database import get_db
from init_db import init_database
from schemas import HealthResponse
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Configure logging and make sure the schema exists before serving"""
    log_file = configure_logging(APP_CONFIG.log_dir, APP_CONFIG.log_level)
    logger.info(f"Logging initialized: {log_file}")

    init_database()
    logger.info(f"Local service domain: {APP_CONFIG.local_domain}")

    yield

    logger.info("Shutting down")


app = FastAPI(
    title=APIConfig.TITLE,
    description="Manage custom domains and their default recipients for an alias-forwarding mail service",
    version=APIConfig.VERSION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=APP_CONFIG.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(domains.router, prefix=APIConfig.PREFIX, tags=["domains"])
app.include_router(active_domains.router, prefix=APIConfig.PREFIX, tags=["active-domains"])
app.include_router(recipients.router, prefix=APIConfig.PREFIX, tags=["recipients"])


@app.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """Liveness check including a database round trip"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"Health check database error: {e}")
        database = "error"

    return HealthResponse(
        status="healthy" if database == "ok" else "degraded",
        version=APIConfig.VERSION,
        database=database,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="127.0.0.1", port=8000)
