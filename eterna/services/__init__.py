"""Request-path services that combine storage with the scoring engine."""

from .support_service import support_artifact

__all__ = ["support_artifact"]
