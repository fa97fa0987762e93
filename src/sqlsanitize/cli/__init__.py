"""CLI module for sqlsanitize."""

from .commands import SanitizeCommandHandler, build_registry

__all__ = [
    "SanitizeCommandHandler",
    "build_registry",
]
