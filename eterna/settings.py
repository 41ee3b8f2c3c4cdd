"""
Global application settings loaded from environment variables.
Used throughout the Lambda functions, the decay worker and shared modules.
"""

from __future__ import annotations

import os


# -----------------------------------------------------------------------------
# Helper: Fetch Required Environment Variables
# -----------------------------------------------------------------------------
def _require_env(name: str) -> str:
    """
    Fetch a REQUIRED environment variable or raise a descriptive error.
    """
    value = os.environ.get(name)
    if value is None:
        raise RuntimeError(f"Missing required environment variable: {name}")
    return value


def _env_bool(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


# -----------------------------------------------------------------------------
# Core AWS & Application Settings
# -----------------------------------------------------------------------------
AWS_REGION: str = _require_env("AWS_REGION")

# DynamoDB tables
ARTIFACTS_TABLE: str = _require_env("ARTIFACTS_TABLE")
COMMENTS_TABLE: str = _require_env("COMMENTS_TABLE")

# Logging Configuration (Optional)
LOG_LEVEL: str = os.environ.get("LOG_LEVEL", "INFO")


# -----------------------------------------------------------------------------
# Decay & Support Settings
# -----------------------------------------------------------------------------
# How often the decay sweep runs when hosted by the in-process worker.
DECAY_INTERVAL_SECONDS: float = float(os.environ.get("DECAY_INTERVAL_SECONDS", "300"))

# Artifacts supported more recently than this are left alone by a sweep.
DECAY_IDLE_THRESHOLD_HOURS: float = float(
    os.environ.get("DECAY_IDLE_THRESHOLD_HOURS", "1")
)

# Conditional-write retries when two supports race on the same artifact.
SUPPORT_MAX_RETRIES: int = int(os.environ.get("SUPPORT_MAX_RETRIES", "3"))


# -----------------------------------------------------------------------------
# Bedrock Settings (narrative generation)
# -----------------------------------------------------------------------------
NARRATIVE_ENABLED: bool = _env_bool("NARRATIVE_ENABLED", True)

BEDROCK_MODEL_ID: str = os.environ.get(
    "BEDROCK_MODEL_ID",
    "us.amazon.nova-lite-v1:0",
)

BEDROCK_REGION: str = os.environ.get("BEDROCK_REGION", "us-east-1")
