"""
Artifact module for Eterna.
Provides the Artifact and Comment entities, their types, and creation policy.
"""

from .artifact import MAX_SCORE, MIN_SCORE, RISK_FLOOR, Artifact, clamp_score
from .comment import Comment, parse_reaction
from .creation import assign_initial_risk, new_artifact, parse_artifact_input
from .types import RARITIES, SUPPORT_ACTIONS, ReactionKind, SupportAction

__all__ = [
    "Artifact",
    "Comment",
    "ReactionKind",
    "SupportAction",
    "SUPPORT_ACTIONS",
    "RARITIES",
    "MIN_SCORE",
    "MAX_SCORE",
    "RISK_FLOOR",
    "clamp_score",
    "assign_initial_risk",
    "new_artifact",
    "parse_artifact_input",
    "parse_reaction",
]
