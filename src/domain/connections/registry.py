"""App Connection Variant Registry - single source of truth for credential shapes.

Every supported (app, method) pair is one ConnectionVariant row. The row
names the pydantic schema that validates its credentials and the fields
that must be stripped before a connection is shown to callers.

Pattern Benefits:
    - Closed set: a variant that is not in the table does not exist
    - No dispatch logic: adding a provider means one row plus one schema
    - Compliance tests iterate the table (test_domain_connection_registry.py)

Registry Structure:
    - ConnectionVariant: Dataclass with variant configuration
    - CONNECTION_VARIANT_REGISTRY: List of all variants
    - APP_DISPLAY_NAMES: User-facing provider names
    - Helper Functions: lookup, validation, redaction, statistics

Usage:
    from src.domain.connections import validate_credentials, redact_credentials

    match validate_credentials(AppConnectionApp.AWS, AwsConnectionMethod.ASSUME_ROLE, raw):
        case Success(value=credentials):
            ...
        case Failure(error=error):
            # error.field == "credentials.role"

    safe = redact_credentials(app, method, credentials)
"""

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.connections.credentials import (
    AwsAccessTokenCredentials,
    AwsAssumeRoleCredentials,
    GitHubAppCredentials,
    GitHubOAuthCredentials,
)
from src.domain.enums import (
    AppConnectionApp,
    AwsConnectionMethod,
    ConnectionMethod,
    GitHubConnectionMethod,
)


class UnknownConnectionVariantError(ValueError):
    """Raised when an (app, method) pair is not in the registry.

    Validated input never reaches this; seeing it means stored data and the
    registry disagree.
    """

    def __init__(self, app: object, method: object) -> None:
        super().__init__(
            f"Unknown app connection variant: app={_raw(app)!r}, method={_raw(method)!r}"
        )
        self.app = app
        self.method = method


@dataclass(frozen=True, kw_only=True)
class ConnectionVariant:
    """Metadata for a single (app, method) variant.

    Attributes:
        app: Provider the variant belongs to.
        method: Authentication method of the provider.
        credentials_schema: Pydantic model validating the credential shape.
        secret_fields: Wire names of credential fields removed on redaction.
        description: Short human-readable description.
    """

    app: AppConnectionApp
    method: ConnectionMethod
    credentials_schema: type[BaseModel]
    secret_fields: frozenset[str]
    description: str

    @property
    def credential_fields(self) -> frozenset[str]:
        """Wire names of all credential fields declared by the schema."""
        return frozenset(
            info.alias or name
            for name, info in self.credentials_schema.model_fields.items()
        )


@dataclass(frozen=True, kw_only=True)
class ValidatedCredentials:
    """Credentials that passed their variant schema.

    Attributes:
        variant: Registry row the credentials were validated against.
        credentials: Credential dict in wire shape (camelCase aliases).
    """

    variant: ConnectionVariant
    credentials: dict[str, Any]


@dataclass(frozen=True, kw_only=True)
class AppConnectionOption:
    """Discovery entry for one provider.

    Attributes:
        app: Provider identifier.
        display_name: User-facing provider name.
        methods: Supported method values, in registry order.
    """

    app: AppConnectionApp
    display_name: str
    methods: tuple[str, ...]


# =============================================================================
# Registry (Single Source of Truth)
# =============================================================================

APP_DISPLAY_NAMES: dict[AppConnectionApp, str] = {
    AppConnectionApp.AWS: "AWS",
    AppConnectionApp.GITHUB: "GitHub",
}

CONNECTION_VARIANT_REGISTRY: list[ConnectionVariant] = [
    ConnectionVariant(
        app=AppConnectionApp.AWS,
        method=AwsConnectionMethod.ASSUME_ROLE,
        credentials_schema=AwsAssumeRoleCredentials,
        secret_fields=frozenset({"role"}),
        description="Assume an IAM role",
    ),
    ConnectionVariant(
        app=AppConnectionApp.AWS,
        method=AwsConnectionMethod.ACCESS_TOKEN,
        credentials_schema=AwsAccessTokenCredentials,
        secret_fields=frozenset({"accessToken"}),
        description="Static AWS access token",
    ),
    ConnectionVariant(
        app=AppConnectionApp.GITHUB,
        method=GitHubConnectionMethod.APP,
        credentials_schema=GitHubAppCredentials,
        secret_fields=frozenset({"role"}),
        description="GitHub App installation",
    ),
    ConnectionVariant(
        app=AppConnectionApp.GITHUB,
        method=GitHubConnectionMethod.OAUTH,
        credentials_schema=GitHubOAuthCredentials,
        secret_fields=frozenset({"accessToken"}),
        description="GitHub OAuth access token",
    ),
]
"""All supported variants.

When adding a provider:
1. Add its enum values in src/domain/enums/app_connection.py
2. Add a credential schema in src/domain/connections/credentials.py
3. Add a row here and a display name in APP_DISPLAY_NAMES
4. Compliance tests enforce completeness
"""


def _raw(value: object) -> object:
    return getattr(value, "value", value)


# =============================================================================
# Lookup Helpers
# =============================================================================


def get_variant(app: str, method: str) -> ConnectionVariant | None:
    """Get variant metadata for an (app, method) pair.

    Args:
        app: Provider (enum member or its string value).
        method: Method (enum member or its string value).

    Returns:
        ConnectionVariant if the pair is registered, None otherwise.

    Example:
        >>> variant = get_variant("aws", "assume-role")
        >>> variant.secret_fields
        frozenset({'role'})
    """
    return next(
        (
            v
            for v in CONNECTION_VARIANT_REGISTRY
            if v.app.value == _raw(app) and v.method.value == _raw(method)
        ),
        None,
    )


def get_app_methods(app: str) -> list[ConnectionMethod]:
    """Get all registered methods of an app (registry order)."""
    return [v.method for v in CONNECTION_VARIANT_REGISTRY if v.app.value == _raw(app)]


def is_method_supported(app: str, method: str) -> bool:
    """Check whether method is an allowed method of app."""
    return get_variant(app, method) is not None


def list_connection_options() -> list[AppConnectionOption]:
    """Enumerate every provider and its methods.

    Pure; used by discovery endpoints.

    Returns:
        One AppConnectionOption per app, in enum order.
    """
    return [
        AppConnectionOption(
            app=app,
            display_name=APP_DISPLAY_NAMES[app],
            methods=tuple(method.value for method in get_app_methods(app)),
        )
        for app in AppConnectionApp
    ]


# =============================================================================
# Validation and Redaction
# =============================================================================


def validate_credentials(
    app: str,
    method: str,
    raw_credentials: Any,
) -> Result[dict[str, Any], ValidationError]:
    """Validate raw credentials; the credential dict only.

    See validate_variant_credentials.
    """
    match validate_variant_credentials(app, method, raw_credentials):
        case Success(value=validated):
            return Success(value=validated.credentials)
        case Failure(error=error):
            return Failure(error=error)


def validate_variant_credentials(
    app: str,
    method: str,
    raw_credentials: Any,
) -> Result[ValidatedCredentials, ValidationError]:
    """Validate raw credentials against the schema of (app, method).

    Extra, missing and wrong-typed fields are rejected. The failure names
    the first offending field as ``credentials.<field>``.

    Args:
        app: Provider.
        method: Authentication method.
        raw_credentials: Untrusted input (usually a dict from JSON).

    Returns:
        Success(ValidatedCredentials) with the resolved variant and the
            credential in wire shape.
        Failure(ValidationError) naming the offending field.
    """
    variant = get_variant(app, method)
    if variant is None:
        return Failure(
            error=ValidationError(
                code=ErrorCode.APP_CONNECTION_METHOD_UNSUPPORTED,
                message=f'Method "{_raw(method)}" is not supported for App "{_raw(app)}"',
                field="method",
            )
        )

    try:
        model = variant.credentials_schema.model_validate(raw_credentials)
    except PydanticValidationError as e:
        first = e.errors()[0]
        location = ".".join(str(part) for part in first["loc"])
        field = f"credentials.{location}" if location else "credentials"
        return Failure(
            error=ValidationError(
                code=ErrorCode.APP_CONNECTION_CREDENTIALS_INVALID,
                message=(
                    f"Invalid credentials for App \"{variant.app.value}\" "
                    f"method \"{variant.method.value}\": {field}: {first['msg']}"
                ),
                field=field,
                details={"error_count": str(e.error_count())},
            )
        )

    return Success(
        value=ValidatedCredentials(
            variant=variant, credentials=model.model_dump(by_alias=True)
        )
    )


def redact_credentials(
    app: str,
    method: str,
    credentials: dict[str, Any],
) -> dict[str, Any]:
    """Remove every secret field of the variant from credentials.

    Non-secret fields pass through unchanged.

    Raises:
        UnknownConnectionVariantError: If (app, method) is not registered.
    """
    variant = get_variant(app, method)
    if variant is None:
        raise UnknownConnectionVariantError(app, method)
    return {
        key: value
        for key, value in credentials.items()
        if key not in variant.secret_fields
    }


def get_registry_statistics() -> dict[str, int]:
    """Get registry statistics.

    Returns:
        Dictionary with counts:
            - total_variants: Number of (app, method) pairs
            - total_apps: Number of providers
            - <app>_methods: Number of methods per provider
    """
    stats = {
        "total_variants": len(CONNECTION_VARIANT_REGISTRY),
        "total_apps": len({v.app for v in CONNECTION_VARIANT_REGISTRY}),
    }
    for app in AppConnectionApp:
        stats[f"{app.value}_methods"] = len(get_app_methods(app))
    return stats
