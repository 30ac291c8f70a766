"""Local KMS adapter.

Derives one AES-256-GCM data key per organization from a single root key
with HKDF-SHA256. Keys are derived on every request and never stored.

    data_key(org) = HKDF-SHA256(root_key, salt=None,
                                info="app-connections:org:<org_id>")

Different organizations get unrelated keys, so a blob encrypted for one
org fails authentication when decrypted with another org's key.
"""

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.encryption_protocol import EncryptionError
from src.domain.protocols.kms_protocol import (
    CipherPair,
    DataKeyScope,
    KmsDataKeyType,
)
from src.infrastructure.kms.aes_gcm_cipher import KEY_SIZE, AesGcmCipher

HKDF_INFO_PREFIX = "app-connections:org:"


class LocalKmsAdapter:
    """KMS adapter backed by a root key held in configuration.

    Usage:
        >>> kms = LocalKmsAdapter(settings.kms_root_key_bytes)
        >>> result = await kms.create_cipher_pair_with_data_key(
        ...     DataKeyScope(type=KmsDataKeyType.ORGANIZATION, org_id=org_id)
        ... )
    """

    def __init__(self, root_key: bytes) -> None:
        """Initialize with the root key.

        Args:
            root_key: 32-byte root key.

        Raises:
            ValueError: If root_key is not 32 bytes.
        """
        if len(root_key) != KEY_SIZE:
            raise ValueError(
                f"KMS root key must be {KEY_SIZE} bytes, got {len(root_key)}"
            )
        self._root_key = root_key

    def _derive_data_key(self, scope: DataKeyScope) -> bytes:
        hkdf = HKDF(
            algorithm=hashes.SHA256(),
            length=KEY_SIZE,
            salt=None,
            info=f"{HKDF_INFO_PREFIX}{scope.org_id}".encode("utf-8"),
        )
        return hkdf.derive(self._root_key)

    async def create_cipher_pair_with_data_key(
        self,
        scope: DataKeyScope,
    ) -> Result[CipherPair, EncryptionError]:
        """Return encrypt/decrypt functions bound to the scope's data key.

        Returns:
            Success(CipherPair).
            Failure(EncryptionError) for an unsupported scope type or an
            unusable derived key.
        """
        if scope.type != KmsDataKeyType.ORGANIZATION:
            return Failure(
                error=EncryptionError(
                    code=ErrorCode.KMS_UNAVAILABLE,
                    message=f"Unsupported data key scope: {scope.type}",
                )
            )

        match AesGcmCipher.create(self._derive_data_key(scope)):
            case Failure(error=error):
                return Failure(error=error)
            case Success(value=cipher):
                return Success(
                    value=CipherPair(
                        encryptor=cipher.encrypt,
                        decryptor=cipher.decrypt,
                    )
                )
