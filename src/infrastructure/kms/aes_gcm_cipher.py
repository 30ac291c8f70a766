"""AES-256-GCM cipher for data-key encryption.

Security Properties:
    - Confidentiality: Only holder of key can decrypt
    - Integrity: Tampering is detected via GCM authentication tag
    - Uniqueness: Random IV per encryption prevents pattern analysis

Architecture:
    - Infrastructure adapter (catches cryptography exceptions)
    - Returns Result types (railway-oriented programming)
    - Operates on bytes; serialization belongs to the credential envelope

Reference:
    - NIST SP 800-38D (Galois/Counter Mode)
"""

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from src.core.enums import ErrorCode
from src.core.result import Failure, Result, Success
from src.domain.protocols.encryption_protocol import (
    DecryptionError,
    EncryptionError,
    EncryptionKeyError,
)

KEY_SIZE = 32  # 256 bits


class AesGcmCipher:
    """AES-256-GCM cipher bound to a single data key.

    Format:
        Encrypted bytes = IV (12 bytes) || ciphertext || auth_tag (16 bytes)

    Usage:
        >>> match AesGcmCipher.create(data_key):
        ...     case Success(value=cipher):
        ...         result = cipher.encrypt(b'{"role":"arn:..."}')
        ...     case Failure(error=error):
        ...         ...

    Thread Safety:
        The AESGCM instance can be used concurrently.
    """

    IV_SIZE = 12  # 96 bits - NIST recommended for GCM
    MIN_ENCRYPTED_SIZE = 12 + 16  # IV + auth tag

    def __init__(self, aesgcm: AESGCM) -> None:
        """Initialize with pre-validated AESGCM instance.

        Use AesGcmCipher.create() factory instead of direct construction.
        """
        self._aesgcm = aesgcm

    @classmethod
    def create(cls, key: bytes) -> Result["AesGcmCipher", EncryptionKeyError]:
        """Create cipher with validated key.

        Args:
            key: 32-byte (256-bit) data key.

        Returns:
            Success(AesGcmCipher) if key is valid.
            Failure(EncryptionKeyError) if key is invalid.
        """
        if len(key) != KEY_SIZE:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=(
                        f"Data key must be exactly {KEY_SIZE} bytes (256 bits), "
                        f"got {len(key)} bytes"
                    ),
                    details={
                        "expected_length": str(KEY_SIZE),
                        "actual_length": str(len(key)),
                    },
                )
            )

        try:
            return Success(value=cls(AESGCM(key)))
        except (TypeError, ValueError) as e:
            return Failure(
                error=EncryptionKeyError(
                    code=ErrorCode.ENCRYPTION_KEY_INVALID,
                    message=f"Failed to initialize cipher: {e}",
                )
            )

    def encrypt(self, plaintext: bytes) -> Result[bytes, EncryptionError]:
        """Encrypt bytes with a fresh random IV.

        Returns:
            Success(IV || ciphertext || tag).
            Failure(EncryptionError) if encryption fails.
        """
        try:
            iv = os.urandom(self.IV_SIZE)
            ciphertext = self._aesgcm.encrypt(iv, plaintext, associated_data=None)
        except (TypeError, ValueError, OverflowError) as e:
            return Failure(
                error=EncryptionError(
                    code=ErrorCode.ENCRYPTION_FAILED,
                    message=f"Encryption failed: {e}",
                )
            )
        return Success(value=iv + ciphertext)

    def decrypt(self, encrypted: bytes) -> Result[bytes, EncryptionError]:
        """Decrypt bytes produced by encrypt().

        Returns:
            Success(plaintext bytes).
            Failure(DecryptionError) if the blob is too short, was produced
            with another key, or has been tampered with.
        """
        if len(encrypted) < self.MIN_ENCRYPTED_SIZE:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message=(
                        f"Encrypted data too short: {len(encrypted)} bytes "
                        f"(minimum {self.MIN_ENCRYPTED_SIZE} bytes)"
                    ),
                    details={
                        "actual_length": str(len(encrypted)),
                        "minimum_length": str(self.MIN_ENCRYPTED_SIZE),
                    },
                )
            )

        iv = encrypted[: self.IV_SIZE]
        ciphertext = encrypted[self.IV_SIZE :]

        try:
            plaintext = self._aesgcm.decrypt(iv, ciphertext, associated_data=None)
        except InvalidTag:
            return Failure(
                error=DecryptionError(
                    code=ErrorCode.DECRYPTION_FAILED,
                    message="Failed to decrypt credentials: invalid key or tampered data",
                )
            )
        return Success(value=plaintext)
