from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .database import engine, Base
from .ledger import get_ledger
from .logging_config import setup_logging
from .routers import materials, dashboard

setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger("greenbuild")

# Create tables (handles new tables but won't add columns to existing ones)
Base.metadata.create_all(bind=engine)

app = FastAPI(
    title=settings.APP_NAME,
    description="Construction material sustainability ledger with LEED-style credit scoring",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(materials.router, prefix="/api")
app.include_router(dashboard.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": "greenbuild-ledger"}


@app.on_event("startup")
def load_ledger():
    """Pull the project ledger from the database before serving."""
    ledger = get_ledger()
    logger.info("Ledger ready with %d materials", len(ledger))
