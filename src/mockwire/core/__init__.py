# src/mockwire/core/__init__.py
"""Core infrastructure: logging."""

from mockwire.core.logging import (
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
]
