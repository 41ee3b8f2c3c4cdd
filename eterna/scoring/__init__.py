"""Decay and support scoring engine."""

from .decay import (
    DEFAULT_DECAY_CONFIG,
    DecayConfig,
    DecayResult,
    calculate_decay,
    fade_increase_for,
)
from .stats import DashboardStats, compute_dashboard_stats
from .support import SupportUpdate, apply_support, parse_support_action

__all__ = [
    "DecayConfig",
    "DEFAULT_DECAY_CONFIG",
    "DecayResult",
    "calculate_decay",
    "fade_increase_for",
    "SupportUpdate",
    "apply_support",
    "parse_support_action",
    "DashboardStats",
    "compute_dashboard_stats",
]
