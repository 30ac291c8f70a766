"""Domain protocols (ports) package.

Protocol definitions the domain layer needs. Infrastructure adapters
implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.
Do NOT re-export from other domain subpackages (events, entities) to avoid
circular import risks.

Usage:
    from src.domain.protocols import KmsProtocol, PermissionServiceProtocol
    from src.domain.protocols import AppConnectionRepository
"""

# Service protocols
from src.domain.protocols.audit_protocol import AuditProtocol
from src.domain.protocols.encryption_protocol import (
    CredentialEncryptionProtocol,
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
    SerializationError,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.kms_protocol import (
    CipherFunction,
    CipherPair,
    DataKeyScope,
    KmsDataKeyType,
    KmsProtocol,
)
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.permission_protocol import (
    OrgPermissionProtocol,
    PermissionServiceProtocol,
)

# Repository protocols
from src.domain.protocols.app_connection_repository import AppConnectionRepository

__all__ = [
    # Service protocols
    "AuditProtocol",
    "CredentialEncryptionProtocol",
    "EventBusProtocol",
    "EventHandler",
    "KmsProtocol",
    "LoggerProtocol",
    "OrgPermissionProtocol",
    "PermissionServiceProtocol",
    # KMS types
    "CipherFunction",
    "CipherPair",
    "DataKeyScope",
    "KmsDataKeyType",
    # Encryption errors
    "DecryptionError",
    "EncryptionError",
    "EncryptionKeyError",
    "SerializationError",
    # Repository protocols
    "AppConnectionRepository",
]
