"""Application environment types.

Used by Settings to select environment-specific behavior, most notably the
log renderer (human-readable console in development, JSON in testing/ci).

Environments:
- DEVELOPMENT: Local development, console log renderer
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration, JSON logs
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
