# mypy: disable-error-code="arg-type"
"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (PostgreSQL)
- Key management (local HKDF KMS)
- Credential encryption (AES-256-GCM envelope)
- Logging (console, JSON in testing/ci/production)

Request-scoped:
- Database session
"""

from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from src.core.config import settings
from src.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from src.domain.protocols.encryption_protocol import CredentialEncryptionProtocol
    from src.domain.protocols.kms_protocol import KmsProtocol
    from src.domain.protocols.logger_protocol import LoggerProtocol


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_kms() -> "KmsProtocol":
    """Get key management service singleton (app-scoped).

    Returns LocalKmsAdapter deriving per-organization data keys from
    settings.kms_root_key.

    Returns:
        KMS implementing KmsProtocol.

    Raises:
        ValueError: If the root key does not decode to 32 bytes.
    """
    from src.infrastructure.kms.local_kms_adapter import LocalKmsAdapter

    return LocalKmsAdapter(root_key=settings.kms_root_key_bytes)


@lru_cache()
def get_credential_envelope() -> "CredentialEncryptionProtocol":
    """Get credential encryption singleton (app-scoped).

    Returns CredentialEnvelope on top of get_kms(). Stateless: a fresh
    cipher pair is requested from the KMS for every call.

    Usage:
        # Application Layer (direct use)
        encryption = get_credential_envelope()
        result = await encryption.encrypt(org_id, {"role": "arn:aws:iam::..."})
    """
    from src.infrastructure.kms.credential_envelope import CredentialEnvelope

    return CredentialEnvelope(kms=get_kms())


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns Database instance with connection pool.
    Use get_db_session() for per-request sessions.

    Returns:
        Database manager instance.
    """
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from src.infrastructure.logging.console_adapter import ConsoleAdapter

    use_json = not settings.is_development
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Yields:
        Database session for request duration.

    Usage:
        # Presentation Layer (FastAPI endpoint)
        from fastapi import Depends
        from sqlalchemy.ext.asyncio import AsyncSession

        @router.get("/app-connections")
        async def list_connections(
            session: AsyncSession = Depends(get_db_session)
        ):
            ...
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
