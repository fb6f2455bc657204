"""Core shared kernel.

This module provides foundational utilities used across all architectural layers:
- Result types for railway-oriented programming
- Settings (pydantic-settings)
- Container (composition root, in core/container/)

The core module has NO dependencies on other application layers, except the
container which wires them together.
"""

from resteasy.core.result import Failure, Result, Success

__all__ = [
    "Failure",
    "Result",
    "Success",
]
