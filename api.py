"""
Question Intelligence API — Main Application
FastAPI wrapper around the rule-based question classifier and the TOS
sufficiency analyzer. Authentication and storage live in front of / behind
this service; it only computes.

Run:
    uvicorn api:app --reload
"""

import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import config
from routers import classification, sufficiency

logging.basicConfig(level=config.LOG_LEVEL, format="%(asctime)s  %(levelname)s  %(name)s  %(message)s")

app = FastAPI(
    title="Question Intelligence API",
    description="Bloom / knowledge-dimension classification, similarity search and TOS sufficiency analysis",
    version="1.0.0",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ─── Routers ───────────────────────────────────────────────────────────────────

app.include_router(classification.router)    # /classification/*
app.include_router(sufficiency.router)       # /sufficiency/*


@app.get("/health")
def health_check():
    """Basic health check - API is running"""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "service": "question-intelligence",
    }
