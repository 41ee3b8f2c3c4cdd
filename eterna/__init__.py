"""Eterna: artifact preservation backend with decay and support scoring."""

__version__ = "0.1.0"
