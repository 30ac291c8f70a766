"""Credential encryption protocol.

Port for turning validated credentials into an org-scoped ciphertext blob
and back. Infrastructure implements it on top of the KMS port
(src/infrastructure/kms/credential_envelope.py).

Also home to the encryption error types shared by the KMS and envelope
adapters.
"""

from dataclasses import dataclass
from typing import Any, Protocol
from uuid import UUID

from src.core.errors import DomainError
from src.core.result import Result


# =============================================================================
# Encryption Error Types (Domain Layer)
# =============================================================================


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionError(DomainError):
    """Base encryption error.

    Does NOT inherit from Exception - used in Result types.
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class EncryptionKeyError(EncryptionError):
    """Invalid key material (wrong length, undecodable, etc.)."""

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class DecryptionError(EncryptionError):
    """Decryption failure.

    Occurs when:
    - The blob was encrypted under another organization's key
    - Data has been tampered with or is truncated
    - The plaintext is not a JSON object
    - Decrypted credentials do not match the row's variant
    """

    pass


@dataclass(frozen=True, slots=True, kw_only=True)
class SerializationError(EncryptionError):
    """Credentials could not be serialized to JSON."""

    pass


# =============================================================================
# Credential Encryption Protocol (Port)
# =============================================================================


class CredentialEncryptionProtocol(Protocol):
    """Protocol for org-scoped credential encryption.

    Example:
        class AppConnectionService:
            def __init__(self, encryption: CredentialEncryptionProtocol, ...):
                self._encryption = encryption

            async def create(self, data, actor):
                result = await self._encryption.encrypt(actor.org_id, credentials)
                ...
    """

    async def encrypt(
        self,
        org_id: UUID,
        credentials: dict[str, Any],
    ) -> Result[bytes, EncryptionError]:
        """Encrypt credentials under the data key of org_id.

        Returns:
            Success(bytes) with the opaque blob.
            Failure(EncryptionError) if serialization or encryption fails.
        """
        ...

    async def decrypt(
        self,
        org_id: UUID,
        blob: bytes,
    ) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt a blob produced by encrypt() for the same org_id.

        Returns:
            Success(dict) with the credentials.
            Failure(DecryptionError) for a wrong org, tampered or malformed
            blob, or a KMS failure.
        """
        ...
