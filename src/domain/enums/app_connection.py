"""App connection providers and their authentication methods.

Each provider (app) exposes a closed set of methods. The pair (app, method)
selects the credential shape in the variant registry
(src/domain/connections/registry.py).

Usage:
    from src.domain.enums import AppConnectionApp, AwsConnectionMethod

    variant = get_variant(AppConnectionApp.AWS, AwsConnectionMethod.ASSUME_ROLE)
"""

from enum import Enum


class AppConnectionApp(str, Enum):
    """Third-party providers an organization can connect to.

    String Enum:
        Values are the identifiers persisted in app_connections.app and
        used in API routes (/app-connections/aws).
    """

    AWS = "aws"
    GITHUB = "github"

    @classmethod
    def values(cls) -> list[str]:
        """Get all app values as strings.

        Returns:
            list[str]: List of app values.
        """
        return [app.value for app in cls]

    @classmethod
    def is_valid(cls, value: str) -> bool:
        """Check if a string is a supported app.

        Args:
            value: String to check.

        Returns:
            bool: True if value is a supported app.
        """
        return value in cls.values()


class AwsConnectionMethod(str, Enum):
    """AWS authentication methods."""

    ASSUME_ROLE = "assume-role"
    """IAM role assumed by the platform (credentials: role ARN)."""

    ACCESS_TOKEN = "access-token"
    """Static access token (credentials: accessToken)."""


class GitHubConnectionMethod(str, Enum):
    """GitHub authentication methods."""

    APP = "github-app"
    """GitHub App installation (credentials: role)."""

    OAUTH = "oauth"
    """OAuth access token (credentials: accessToken)."""


type ConnectionMethod = AwsConnectionMethod | GitHubConnectionMethod
