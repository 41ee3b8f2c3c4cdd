"""
Comments left on artifacts, with an increment-only support counter and
increment-only reaction counters over a closed set of reactions.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Mapping, Optional

from eterna.artifacts.types import ReactionKind
from eterna.errors import InvalidReactionError
from eterna.utils.time_utils import parse_iso_datetime, to_iso_z, utc_now


def empty_reactions() -> Dict[ReactionKind, int]:
    return {kind: 0 for kind in ReactionKind}


def parse_reaction(raw: Any) -> ReactionKind:
    """
    Resolve a raw reaction value (the emoji itself) to a ReactionKind.

    Raises:
        InvalidReactionError: for anything outside the closed set
    """
    try:
        return ReactionKind(raw)
    except ValueError:
        allowed = ", ".join(kind.value for kind in ReactionKind)
        raise InvalidReactionError(
            f"Invalid reaction {raw!r}. Must be one of: {allowed}"
        ) from None


@dataclass
class Comment:
    comment_id: str
    artifact_id: str
    content: str
    created_at: datetime
    support_count: int = 0
    reactions: Dict[ReactionKind, int] = field(default_factory=empty_reactions)

    @classmethod
    def new(
        cls, artifact_id: str, content: str, now: Optional[datetime] = None
    ) -> "Comment":
        content = (content or "").strip()
        if not content:
            raise ValueError("Comment content must not be empty")
        return cls(
            comment_id=str(uuid.uuid4()),
            artifact_id=artifact_id,
            content=content,
            created_at=now or utc_now(),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "comment_id": self.comment_id,
            "artifact_id": self.artifact_id,
            "content": self.content,
            "support_count": self.support_count,
            "created_at": to_iso_z(self.created_at),
            "reactions": {kind.value: count for kind, count in self.reactions.items()},
        }

    @classmethod
    def from_dict(cls, item: Mapping[str, Any]) -> "Comment":
        reactions = empty_reactions()
        for key, count in (item.get("reactions") or {}).items():
            try:
                reactions[ReactionKind(key)] = int(count)
            except ValueError:
                # Legacy counters outside the closed set are dropped
                continue
        return cls(
            comment_id=str(item["comment_id"]),
            artifact_id=str(item["artifact_id"]),
            content=item.get("content", ""),
            created_at=parse_iso_datetime(str(item["created_at"])),
            support_count=int(item.get("support_count", 0)),
            reactions=reactions,
        )
