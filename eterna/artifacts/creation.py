"""
Artifact creation: input validation and the initial-risk assignment policy.

A new artifact starts pristine (fade_level 0, no support) with an extinction
risk drawn uniformly from [20, 100]. Rarity and token id are cosmetic and
drawn from the same injectable random source.
"""

from __future__ import annotations

import random
import uuid
from datetime import datetime
from typing import Any, Dict, List, Mapping, Optional

from eterna.artifacts.artifact import Artifact
from eterna.artifacts.types import RARITIES
from eterna.errors import ValidationError
from eterna.utils.time_utils import utc_now

INITIAL_RISK_MIN = 20
INITIAL_RISK_MAX = 100

TOKEN_PREFIX = "ETR-"
TOKEN_SPACE = 1_000_000

REQUIRED_TEXT_FIELDS = ("title", "artifact_type", "description", "image_url")

# Accept the camelCase names the browser client sends
_FIELD_ALIASES = {"type": "artifact_type", "imageUrl": "image_url"}


def assign_initial_risk(rng: Optional[random.Random] = None) -> int:
    """Draw an initial extinction risk uniformly from [20, 100]."""
    return (rng or random).randint(INITIAL_RISK_MIN, INITIAL_RISK_MAX)


def assign_rarity(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(RARITIES)


def assign_token_id(rng: Optional[random.Random] = None) -> str:
    value = (rng or random).randrange(TOKEN_SPACE)
    return f"{TOKEN_PREFIX}{value:X}"


def parse_artifact_input(body: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Validate a create-artifact payload.

    Returns:
        dict with title, artifact_type, description, image_url and tags

    Raises:
        ValidationError: naming the offending field
    """
    normalized = {_FIELD_ALIASES.get(key, key): value for key, value in body.items()}

    parsed: Dict[str, Any] = {}
    for name in REQUIRED_TEXT_FIELDS:
        value = normalized.get(name)
        if not isinstance(value, str) or not value.strip():
            raise ValidationError(f"Field '{name}' is required", field=name)
        parsed[name] = value.strip()

    tags = normalized.get("tags") or []
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise ValidationError("Field 'tags' must be a list of strings", field="tags")
    parsed["tags"] = [t.strip() for t in tags if t.strip()]

    return parsed


def new_artifact(
    title: str,
    artifact_type: str,
    description: str,
    image_url: str,
    tags: Optional[List[str]] = None,
    rng: Optional[random.Random] = None,
    now: Optional[datetime] = None,
) -> Artifact:
    """
    Build a brand-new artifact with its starting scores.
    """
    created_at = now or utc_now()
    artifact = Artifact(
        artifact_id=str(uuid.uuid4()),
        title=title,
        artifact_type=artifact_type,
        description=description,
        image_url=image_url,
        tags=list(tags or []),
        extinction_risk=assign_initial_risk(rng),
        fade_level=0,
        support_count=0,
        created_at=created_at,
        last_supported_at=created_at,
        token_id=assign_token_id(rng),
        rarity=assign_rarity(rng),
    )
    return artifact.validate()
