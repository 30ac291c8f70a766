"""Application environment types.

Used by Settings to pick environment-specific behavior (log renderer,
debug endpoints).

Environments:
- DEVELOPMENT: Local development with hot reload, debug mode
- TESTING: Automated test execution
- CI: Continuous integration environment
- PRODUCTION: Production deployment
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
