"""
Seed an empty deployment with sample artifacts and comments.

    python -m eterna.seed

Does nothing when the artifact table already holds data.
"""

from __future__ import annotations

import sys
import uuid
from typing import Any, Dict, List

from eterna.artifacts.artifact import Artifact
from eterna.artifacts.comment import Comment
from eterna.artifacts.creation import assign_rarity, assign_token_id
from eterna.errors import EternaError
from eterna.logutil import clogger
from eterna.storage import ArtifactStore, DynamoArtifactStore, DynamoCommentStore
from eterna.utils.time_utils import utc_now

SAMPLE_ARTIFACTS: List[Dict[str, Any]] = [
    {
        "title": "Grandma's Sourdough Bread",
        "artifact_type": "recipe",
        "description": (
            "A 100-year old sourdough starter recipe passed down through generations. "
            "Requires daily feeding and a warm environment."
        ),
        "image_url": "https://images.unsplash.com/photo-1589367920969-ab8e050bf0ef?q=80&w=1000&auto=format&fit=crop",
        "tags": ["baking", "family", "tradition"],
        "extinction_risk": 85,
        "fade_level": 40,
        "support_count": 12,
        "ai_narrative": (
            "The warmth of a kitchen, the smell of yeast and time. "
            "A legacy that only survives if hands are willing to knead."
        ),
        "comments": [
            ("I remember my own grandmother making this. We need to keep these recipes alive!", 4),
            ("Is the starter difficult to maintain?", 1),
        ],
    },
    {
        "title": "Watchmaking by Hand",
        "artifact_type": "skill",
        "description": (
            "The delicate art of assembling mechanical timepieces without digital "
            "assistance. A meditative practice requiring immense focus."
        ),
        "image_url": "https://images.unsplash.com/photo-1509048191080-d2984bad6ae5?q=80&w=1000&auto=format&fit=crop",
        "tags": ["craftsmanship", "time", "focus"],
        "extinction_risk": 92,
        "fade_level": 75,
        "support_count": 5,
        "ai_narrative": (
            "Tiny gears and springs, a heartbeat built from metal. As the digital age "
            "races forward, the metronome of the past slows."
        ),
        "comments": [("Such a beautiful and lost art.", 7)],
    },
    {
        "title": "The Summer Solstice Bonfire",
        "artifact_type": "ritual",
        "description": (
            "An annual gathering to celebrate the longest day of the year. Involves "
            "leaping over the flames and singing old folk songs."
        ),
        "image_url": "https://images.unsplash.com/photo-1525087740718-9e0f2c58c7ef?q=80&w=1000&auto=format&fit=crop",
        "tags": ["community", "nature", "celebration"],
        "extinction_risk": 45,
        "fade_level": 10,
        "support_count": 38,
        "ai_narrative": (
            "Flames reaching for the brief night sky. A primal echo of when we gathered "
            "not around screens, but around the fire."
        ),
        "comments": [],
    },
]


def seed(artifact_store: ArtifactStore, comment_store: DynamoCommentStore) -> int:
    """
    Insert the sample data if no artifacts exist yet.

    Returns:
        Number of artifacts created (0 when already seeded)
    """
    if artifact_store.list_all():
        clogger.info("Database already seeded. Skipping.")
        return 0

    now = utc_now()
    for sample in SAMPLE_ARTIFACTS:
        fields = {k: v for k, v in sample.items() if k != "comments"}
        artifact = artifact_store.create(
            Artifact(
                artifact_id=str(uuid.uuid4()),
                created_at=now,
                last_supported_at=now,
                token_id=assign_token_id(),
                rarity=assign_rarity(),
                **fields,
            )
        )
        for content, support_count in sample["comments"]:
            comment = Comment.new(artifact.artifact_id, content, now=now)
            comment.support_count = support_count
            comment_store.create(comment)

    clogger.info(f"Seeded {len(SAMPLE_ARTIFACTS)} artifacts")
    return len(SAMPLE_ARTIFACTS)


def main() -> int:
    try:
        seed(DynamoArtifactStore(), DynamoCommentStore())
    except EternaError as e:
        clogger.error(f"Seeding failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
