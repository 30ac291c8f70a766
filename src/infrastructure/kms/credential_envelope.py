"""Credential envelope adapter.

Turns a credential dict into an org-scoped ciphertext blob and back:

    encrypt: dict -> compact JSON -> utf-8 -> KMS encryptor(org) -> bytes
    decrypt: bytes -> KMS decryptor(org) -> utf-8 -> JSON object -> dict

A fresh cipher pair is requested from the KMS on every call; data keys are
never cached here.

Architecture:
    - Implements CredentialEncryptionProtocol
    - Depends only on KmsProtocol
    - Every KMS or decoding failure on the decrypt path is a DecryptionError
"""

import json
from typing import Any
from uuid import UUID

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    SerializationError,
)
from src.domain.protocols.kms_protocol import (
    CipherPair,
    DataKeyScope,
    KmsDataKeyType,
    KmsProtocol,
)


class CredentialEnvelope:
    """Org-scoped credential encryption on top of a KMS.

    Usage:
        >>> envelope = CredentialEnvelope(kms=get_kms())
        >>> match await envelope.encrypt(org_id, {"role": "arn:aws:iam::1:role/x"}):
        ...     case Success(value=blob):
        ...         ...
    """

    def __init__(self, kms: KmsProtocol) -> None:
        self._kms = kms

    async def _cipher_pair(self, org_id: UUID) -> Result[CipherPair, EncryptionError]:
        return await self._kms.create_cipher_pair_with_data_key(
            DataKeyScope(type=KmsDataKeyType.ORGANIZATION, org_id=org_id)
        )

    async def encrypt(
        self,
        org_id: UUID,
        credentials: dict[str, Any],
    ) -> Result[bytes, EncryptionError]:
        """Encrypt credentials under the data key of org_id.

        Args:
            org_id: Organization whose data key is used.
            credentials: Validated credential dict (JSON-serializable).

        Returns:
            Success(bytes) with the opaque blob.
            Failure(SerializationError) if credentials are not serializable.
            Failure(EncryptionError) if the KMS or cipher fails.
        """
        try:
            plaintext = json.dumps(credentials, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as e:
            return Failure(
                error=SerializationError(
                    code=ErrorCode.INVALID_INPUT,
                    message=f"Failed to serialize credentials to JSON: {e}",
                )
            )

        match await self._cipher_pair(org_id):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=pair):
                return pair.encryptor(plaintext)

    async def decrypt(
        self,
        org_id: UUID,
        blob: bytes,
    ) -> Result[dict[str, Any], EncryptionError]:
        """Decrypt a blob produced by encrypt() for the same org_id.

        Returns:
            Success(dict) with the credentials.
            Failure(DecryptionError) for a wrong org, malformed or tampered
            blob, non-JSON plaintext, or an unavailable KMS.
        """
        match await self._cipher_pair(org_id):
            case Failure(error=error):
                return Failure(
                    error=DecryptionError(
                        code=ErrorCode.DECRYPTION_FAILED,
                        message=f"KMS unavailable: {error.message}",
                    )
                )
            case Success(value=pair):
                decrypted = pair.decryptor(blob)

        match decrypted:
            case Failure(error=DecryptionError() as error):
                return Failure(error=error)
            case Failure(error=error):
                return Failure(
                    error=DecryptionError(
                        code=ErrorCode.DECRYPTION_FAILED,
                        message=error.message,
                    )
                )
            case Success(value=plaintext):
                pass

        try:
            credentials = json.loads(plaintext.decode("utf-8"))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message=f"Failed to deserialize decrypted credentials: {e}",
                )
            )

        if not isinstance(credentials, dict):
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Decrypted credentials are not a JSON object",
                )
            )
        return Success(value=credentials)
