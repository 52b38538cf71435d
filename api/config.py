"""
PayCycle API configuration.

Environment variables are read once, at import time.
"""
import os

from paycycle.engine import DEFAULT_PERIODS, MAX_PERIODS

# =============================================================================
# Configuration
# =============================================================================

PAYCYCLE_LOG_LEVEL = os.getenv("PAYCYCLE_LOG_LEVEL", "INFO")
PAYCYCLE_DOCS_ENABLED = os.getenv("PAYCYCLE_DOCS_ENABLED", "true").lower() == "true"
PAYCYCLE_PACK_PATH = os.getenv("PAYCYCLE_PACK_PATH") or None

# Never above the engine cap
PAYCYCLE_MAX_PERIODS = min(int(os.getenv("PAYCYCLE_MAX_PERIODS", str(MAX_PERIODS))), MAX_PERIODS)
PAYCYCLE_DEFAULT_PERIODS = min(
    int(os.getenv("PAYCYCLE_DEFAULT_PERIODS", str(DEFAULT_PERIODS))),
    PAYCYCLE_MAX_PERIODS,
)

PAYCYCLE_CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("PAYCYCLE_CORS_ORIGINS", "").split(",")
    if origin.strip()
]
