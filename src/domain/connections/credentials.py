"""Credential schemas for every app connection variant.

One pydantic model per (app, method) pair. Models are strict: unknown keys,
missing keys, non-string values and empty strings are rejected. Wire names
are camelCase (``accessToken``) to stay compatible with existing API clients;
``model_dump(by_alias=True)`` produces the wire shape.

Reference:
    - src/domain/connections/registry.py (which schema belongs to which variant)
"""

from pydantic import BaseModel, ConfigDict, Field


class _StrictCredentials(BaseModel):
    """Base for credential schemas (no coercion, no extra keys)."""

    model_config = ConfigDict(extra="forbid", strict=True, frozen=True)


class _RoleCredentials(_StrictCredentials):
    role: str = Field(min_length=1)


class _AccessTokenCredentials(_StrictCredentials):
    access_token: str = Field(min_length=1, alias="accessToken")


# =============================================================================
# AWS
# =============================================================================


class AwsAssumeRoleCredentials(_RoleCredentials):
    """AWS assume-role credentials.

    Attributes:
        role: IAM role ARN (``arn:aws:iam::123456789012:role/deploy``).
    """


class AwsAccessTokenCredentials(_AccessTokenCredentials):
    """AWS static access token credentials."""


# =============================================================================
# GitHub
# =============================================================================


class GitHubAppCredentials(_RoleCredentials):
    """GitHub App installation credentials."""


class GitHubOAuthCredentials(_AccessTokenCredentials):
    """GitHub OAuth access token credentials."""
