"""
Support transition: how a user's vote, stake or interaction improves an
artifact's scores.

Every action lowers fade by a flat 20 points (floored at 0) and adds one
support. Risk reduction depends on the action and is floored at 5:

    vote     -> risk - 2
    stake    -> risk - 5
    interact -> risk - 1
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Mapping, cast

from eterna.artifacts.artifact import MIN_SCORE, RISK_FLOOR, Artifact
from eterna.artifacts.types import SUPPORT_ACTIONS, SupportAction
from eterna.errors import InvalidActionError

FADE_REDUCTION = 20

RISK_REDUCTION: Mapping[str, int] = {
    "vote": 2,
    "stake": 5,
    "interact": 1,
}


@dataclass(frozen=True)
class SupportUpdate:
    """The four fields a support action writes, as one atomic update."""
    fade_level: int
    extinction_risk: int
    support_count: int
    last_supported_at: datetime

    def as_fields(self) -> Dict[str, Any]:
        return {
            "fade_level": self.fade_level,
            "extinction_risk": self.extinction_risk,
            "support_count": self.support_count,
            "last_supported_at": self.last_supported_at,
        }


def parse_support_action(raw: Any) -> SupportAction:
    """
    Validate a raw action value from a request.

    Raises:
        InvalidActionError: for anything outside vote, stake, interact
    """
    if not isinstance(raw, str) or raw not in SUPPORT_ACTIONS:
        raise InvalidActionError(
            f"Invalid action {raw!r}. Must be one of: {', '.join(SUPPORT_ACTIONS)}"
        )
    return cast(SupportAction, raw)


def apply_support(
    artifact: Artifact, action: SupportAction, now: datetime
) -> SupportUpdate:
    """
    Compute the artifact's scores after one support action at `now`.

    Pure: reads the artifact, returns the new fields, writes nothing.
    """
    try:
        risk_reduction = RISK_REDUCTION[action]
    except KeyError:
        raise InvalidActionError(f"Invalid action {action!r}") from None

    return SupportUpdate(
        fade_level=max(MIN_SCORE, artifact.fade_level - FADE_REDUCTION),
        extinction_risk=max(RISK_FLOOR, artifact.extinction_risk - risk_reduction),
        support_count=artifact.support_count + 1,
        # a skewed clock must not put the idle reference before creation
        last_supported_at=max(now, artifact.created_at),
    )
