"""Core enums package.

Usage:
    from resteasy.core.enums import Environment
"""

from resteasy.core.enums.environment import Environment

__all__ = ["Environment"]
