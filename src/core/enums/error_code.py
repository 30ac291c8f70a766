"""Domain-level error codes (machine-readable).

Error codes follow ENTITY_ACTION_REASON naming convention.
Used with Result types for railway-oriented programming.

Categories:
- Validation errors (INVALID_*, VALIDATION_*)
- Resource errors (*_NOT_FOUND)
- Conflict errors (*_ALREADY_EXISTS, *_CONFLICT)
- Authorization errors (PERMISSION_*)
- Encryption errors (ENCRYPTION_*, DECRYPTION_*)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable).

    Error codes follow ENTITY_ACTION_REASON naming convention.
    """

    # Validation errors
    VALIDATION_FAILED = "validation_failed"
    INVALID_INPUT = "invalid_input"
    APP_CONNECTION_CREDENTIALS_INVALID = "app_connection_credentials_invalid"
    APP_CONNECTION_METHOD_UNSUPPORTED = "app_connection_method_unsupported"
    APP_CONNECTION_APP_MISMATCH = "app_connection_app_mismatch"

    # Resource errors
    RESOURCE_NOT_FOUND = "resource_not_found"
    APP_CONNECTION_NOT_FOUND = "app_connection_not_found"

    # Conflict errors
    RESOURCE_CONFLICT = "resource_conflict"
    APP_CONNECTION_NAME_ALREADY_EXISTS = "app_connection_name_already_exists"

    # Authorization errors
    PERMISSION_DENIED = "permission_denied"
    AUTHORIZATION_FAILED = "authorization_failed"

    # Audit trail errors
    AUDIT_RECORD_FAILED = "audit_record_failed"

    # Encryption errors
    ENCRYPTION_KEY_INVALID = "encryption_key_invalid"
    ENCRYPTION_FAILED = "encryption_failed"
    DECRYPTION_FAILED = "decryption_failed"
    KMS_UNAVAILABLE = "kms_unavailable"
