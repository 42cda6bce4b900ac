"""
Service configuration
Read once from the environment (a local .env file is loaded if present).

Only service-level knobs live here. Classifier constants (review threshold,
fingerprint size, cue tables) are fixed in code so stored labels stay
reproducible across deployments.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# ── Logging ────────────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# ── Similarity search ──────────────────────────────────────────────────────────
SIMILARITY_THRESHOLD = float(os.getenv("SIMILARITY_THRESHOLD", "0.7"))
MAX_SIMILARITY_CORPUS = int(os.getenv("MAX_SIMILARITY_CORPUS", "5000"))

# ── Review workflow ────────────────────────────────────────────────────────────
AUTO_APPROVE_THRESHOLD = float(os.getenv("AUTO_APPROVE_THRESHOLD", "0.9"))

# ── HTTP ───────────────────────────────────────────────────────────────────────
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
