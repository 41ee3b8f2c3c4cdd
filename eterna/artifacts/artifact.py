"""
The Artifact entity: a recorded memory, skill or ritual together with the
decay and support state the scoring engine evolves.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List, Mapping, Optional

from eterna.utils.time_utils import ensure_utc, parse_iso_datetime, to_iso_z

# Score bounds shared by fade_level and extinction_risk
MIN_SCORE = 0
MAX_SCORE = 100

# Extinction risk never drops below this once an artifact has been supported
RISK_FLOOR = 5


def _as_int(value: Any) -> int:
    # DynamoDB hands numbers back as Decimal
    if isinstance(value, Decimal):
        return int(value.to_integral_value())
    return int(value)


def _as_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return ensure_utc(value)
    return parse_iso_datetime(str(value))


def clamp_score(value: int) -> int:
    """Clamp a score into [MIN_SCORE, MAX_SCORE]."""
    return max(MIN_SCORE, min(MAX_SCORE, value))


@dataclass
class Artifact:
    """
    A preserved artifact.

    fade_level: 0 is pristine, 100 is fully faded.
    extinction_risk: 0-100, lower is safer.
    """

    artifact_id: str
    title: str
    artifact_type: str
    description: str
    image_url: str
    extinction_risk: int
    created_at: datetime
    last_supported_at: datetime
    fade_level: int = 0
    support_count: int = 0
    tags: List[str] = field(default_factory=list)
    ai_narrative: Optional[str] = None
    token_id: Optional[str] = None
    rarity: Optional[str] = None

    # ------------------------------------------------------------------
    # Invariants
    # ------------------------------------------------------------------
    def validate(self) -> "Artifact":
        """
        Check every scoring invariant.

        Raises:
            ValueError: naming the first broken invariant
        """
        validate_update_fields(
            {
                "fade_level": self.fade_level,
                "extinction_risk": self.extinction_risk,
                "support_count": self.support_count,
            }
        )
        if self.support_count > 0 and self.extinction_risk < RISK_FLOOR:
            raise ValueError(
                f"extinction_risk {self.extinction_risk} is below the floor "
                f"{RISK_FLOOR} for a supported artifact"
            )
        if self.last_supported_at < self.created_at:
            raise ValueError("last_supported_at precedes created_at")
        return self

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------
    def to_dict(self) -> Dict[str, Any]:
        """Serialize to a DynamoDB item."""
        item: Dict[str, Any] = {
            "artifact_id": self.artifact_id,
            "title": self.title,
            "artifact_type": self.artifact_type,
            "description": self.description,
            "image_url": self.image_url,
            "tags": list(self.tags),
            "extinction_risk": self.extinction_risk,
            "fade_level": self.fade_level,
            "support_count": self.support_count,
            "created_at": to_iso_z(self.created_at),
            "last_supported_at": to_iso_z(self.last_supported_at),
        }
        # Optional attributes are omitted rather than stored as NULL
        for key in ("ai_narrative", "token_id", "rarity"):
            value = getattr(self, key)
            if value is not None:
                item[key] = value
        return item

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> "Artifact":
        """Rebuild an artifact from a DynamoDB item."""
        created_at = _as_datetime(item["created_at"])
        return cls(
            artifact_id=str(item["artifact_id"]),
            title=item.get("title", ""),
            artifact_type=item.get("artifact_type", ""),
            description=item.get("description", ""),
            image_url=item.get("image_url", ""),
            tags=list(item.get("tags") or []),
            extinction_risk=_as_int(item["extinction_risk"]),
            fade_level=_as_int(item.get("fade_level", 0)),
            support_count=_as_int(item.get("support_count", 0)),
            created_at=created_at,
            last_supported_at=_as_datetime(item.get("last_supported_at") or created_at),
            ai_narrative=item.get("ai_narrative"),
            token_id=item.get("token_id"),
            rarity=item.get("rarity"),
        )

    def __repr__(self) -> str:
        return (
            f"Artifact(artifact_id='{self.artifact_id}', title='{self.title}', "
            f"fade_level={self.fade_level}, extinction_risk={self.extinction_risk})"
        )


def validate_update_fields(fields: Mapping[str, Any]) -> None:
    """
    Validate the fields present in a (partial) update.

    Raises:
        ValueError: on an unknown field or an out-of-range value
    """
    for name, value in fields.items():
        if name in ("fade_level", "extinction_risk"):
            if not MIN_SCORE <= value <= MAX_SCORE:
                raise ValueError(
                    f"{name} must be within [{MIN_SCORE}, {MAX_SCORE}], got {value}"
                )
        elif name == "support_count":
            if value < 0:
                raise ValueError(f"support_count must be non-negative, got {value}")
        elif name == "last_supported_at":
            if not isinstance(value, datetime):
                raise ValueError("last_supported_at must be a datetime")
        elif name == "ai_narrative":
            if value is not None and not isinstance(value, str):
                raise ValueError("ai_narrative must be a string")
        else:
            raise ValueError(f"Field '{name}' cannot be updated")
