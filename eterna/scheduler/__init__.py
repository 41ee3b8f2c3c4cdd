"""Periodic decay sweep."""

from .decay_scheduler import DecayScheduler, TickReport

__all__ = ["DecayScheduler", "TickReport"]
