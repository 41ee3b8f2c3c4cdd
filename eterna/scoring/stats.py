"""
Dashboard statistics over the whole artifact collection.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Iterable, Mapping

from eterna.artifacts.artifact import Artifact

# Artifacts above this fade level count as at risk on the dashboard
AT_RISK_FADE_LEVEL = 80

RISK_BUCKETS = (
    ("<20", 0, 20),
    ("20-50", 20, 50),
    ("50-80", 50, 80),
    (">80", 80, 101),
)


@dataclass
class DashboardStats:
    total_artifacts: int = 0
    average_fade_level: int = 0
    total_interactions: int = 0
    artifacts_at_risk: int = 0
    risk_distribution: Dict[str, int] = field(
        default_factory=lambda: {name: 0 for name, _, _ in RISK_BUCKETS}
    )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def _risk_bucket(extinction_risk: int) -> str:
    for name, low, high in RISK_BUCKETS:
        if low <= extinction_risk < high:
            return name
    return RISK_BUCKETS[-1][0]


def compute_dashboard_stats(
    artifacts: Iterable[Artifact],
    comment_counts: Mapping[str, int],
) -> DashboardStats:
    """
    Summarize the collection.

    total_interactions counts every support on every artifact plus every
    comment left on them.
    """
    stats = DashboardStats()
    total_fade = 0

    for artifact in artifacts:
        stats.total_artifacts += 1
        total_fade += artifact.fade_level
        if artifact.fade_level > AT_RISK_FADE_LEVEL:
            stats.artifacts_at_risk += 1
        stats.total_interactions += artifact.support_count
        stats.total_interactions += comment_counts.get(artifact.artifact_id, 0)
        stats.risk_distribution[_risk_bucket(artifact.extinction_risk)] += 1

    if stats.total_artifacts:
        # round half up
        stats.average_fade_level = int(total_fade / stats.total_artifacts + 0.5)

    return stats
