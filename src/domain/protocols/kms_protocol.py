"""KMS protocol (port).

Minimal key-management capability needed by the credential envelope: hand
out an encrypt/decrypt function pair bound to the data key of a scope.
Key derivation, storage and rotation belong to the adapter.

Implementations:
    - LocalKmsAdapter: HKDF per-org keys from a root key
      (src/infrastructure/kms/local_kms_adapter.py)
"""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Protocol
from uuid import UUID

from src.core.result import Result
from src.domain.protocols.encryption_protocol import EncryptionError

type CipherFunction = Callable[[bytes], Result[bytes, EncryptionError]]


class KmsDataKeyType(str, Enum):
    """Scope kinds a data key can be bound to."""

    ORGANIZATION = "organization"


@dataclass(frozen=True, slots=True, kw_only=True)
class DataKeyScope:
    """Which data key to use.

    Attributes:
        type: Scope kind.
        org_id: Organization owning the key.
    """

    type: KmsDataKeyType
    org_id: UUID


@dataclass(frozen=True, slots=True, kw_only=True)
class CipherPair:
    """Encrypt/decrypt functions bound to one data key.

    Attributes:
        encryptor: plaintext bytes -> Result[ciphertext bytes].
        decryptor: ciphertext bytes -> Result[plaintext bytes].
    """

    encryptor: CipherFunction
    decryptor: CipherFunction


class KmsProtocol(Protocol):
    """Protocol for the key management capability."""

    async def create_cipher_pair_with_data_key(
        self,
        scope: DataKeyScope,
    ) -> Result[CipherPair, EncryptionError]:
        """Return a cipher pair bound to the data key of scope.

        Args:
            scope: Data key scope (organization).

        Returns:
            Success(CipherPair) if the key is available.
            Failure(EncryptionError) if the KMS cannot provide the key.
        """
        ...
