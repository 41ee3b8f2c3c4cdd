"""
Fade decay for artifacts nobody has supported recently.

Math (per sweep, per artifact):
1. Skip if the artifact was supported within the idle threshold (1 hour)
2. fade_increase = ceil(extinction_risk / 10), at least 1
   (1-10 points per sweep, monotone in risk)
3. new_fade = min(100, fade_level + fade_increase)
4. Only fade_level changes, and only upward.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from eterna.artifacts.artifact import MAX_SCORE, Artifact
from eterna.utils.time_utils import hours_between


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class DecayConfig:
    # Artifacts supported within this many hours are left alone
    idle_threshold_hours: float = 1.0

    # Risk points per point of fade added on each sweep
    risk_divisor: int = 10

    # Every idle artifact fades by at least this much until fully faded
    min_fade_increase: int = 1


DEFAULT_DECAY_CONFIG = DecayConfig()


# =============================================================================
# Decay Math
# =============================================================================

@dataclass(frozen=True)
class DecayResult:
    """Result of the decay calculation for one artifact."""
    artifact_id: str
    old_fade_level: int
    new_fade_level: int
    hours_since_support: float
    skip_reason: Optional[str] = None

    @property
    def decayed(self) -> bool:
        return self.new_fade_level != self.old_fade_level


def fade_increase_for(
    extinction_risk: int, config: DecayConfig = DEFAULT_DECAY_CONFIG
) -> int:
    """
    Fade points added per sweep for an idle artifact.

    >>> fade_increase_for(85)
    9
    >>> fade_increase_for(100)
    10
    >>> fade_increase_for(5)
    1
    """
    return max(config.min_fade_increase, math.ceil(extinction_risk / config.risk_divisor))


def calculate_decay(
    artifact: Artifact,
    now: datetime,
    config: DecayConfig = DEFAULT_DECAY_CONFIG,
) -> DecayResult:
    """
    Calculate the fade level an artifact should have after one sweep at `now`.
    """
    hours_idle = hours_between(artifact.last_supported_at, now)

    if hours_idle <= config.idle_threshold_hours:
        return DecayResult(
            artifact_id=artifact.artifact_id,
            old_fade_level=artifact.fade_level,
            new_fade_level=artifact.fade_level,
            hours_since_support=hours_idle,
            skip_reason="recently_supported",
        )

    if artifact.fade_level >= MAX_SCORE:
        return DecayResult(
            artifact_id=artifact.artifact_id,
            old_fade_level=artifact.fade_level,
            new_fade_level=artifact.fade_level,
            hours_since_support=hours_idle,
            skip_reason="fully_faded",
        )

    increase = fade_increase_for(artifact.extinction_risk, config)
    return DecayResult(
        artifact_id=artifact.artifact_id,
        old_fade_level=artifact.fade_level,
        new_fade_level=min(MAX_SCORE, artifact.fade_level + increase),
        hours_since_support=hours_idle,
    )
