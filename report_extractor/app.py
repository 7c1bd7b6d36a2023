"""FastAPI application for the report extractor."""
from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .extraction.router import router as extraction_router
from .utils.logging import configure_logging

configure_logging(get_settings().log_level)

app = FastAPI(title="Report Extractor", version="1.0.0")

app.include_router(extraction_router)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
