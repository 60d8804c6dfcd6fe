"""Application environment types.

Used by Settings to pick environment-specific behavior (log rendering,
debug endpoints).

Environments:
- DEVELOPMENT: Local development, human-readable logs
- TESTING: Automated test execution with in-memory collaborators
- CI: Continuous integration environment
- PRODUCTION: Production deployment, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
