"""App connection variant registry.

Exports the registry and its helpers for use throughout the application.
"""

from src.domain.connections.registry import (
    APP_DISPLAY_NAMES,
    CONNECTION_VARIANT_REGISTRY,
    AppConnectionOption,
    ConnectionVariant,
    UnknownConnectionVariantError,
    ValidatedCredentials,
    get_app_methods,
    get_registry_statistics,
    get_variant,
    is_method_supported,
    list_connection_options,
    redact_credentials,
    validate_credentials,
    validate_variant_credentials,
)

__all__ = [
    # Registry
    "APP_DISPLAY_NAMES",
    "CONNECTION_VARIANT_REGISTRY",
    # Types
    "AppConnectionOption",
    "ConnectionVariant",
    "UnknownConnectionVariantError",
    "ValidatedCredentials",
    # Helper Functions
    "get_app_methods",
    "get_registry_statistics",
    "get_variant",
    "is_method_supported",
    "list_connection_options",
    "redact_credentials",
    "validate_credentials",
    "validate_variant_credentials",
]
