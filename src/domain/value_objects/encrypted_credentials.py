"""Encrypted credentials value object.

Opaque ciphertext blob produced by the credential envelope. The domain never
inspects the bytes; only the envelope adapter that produced them can turn
them back into credentials.

Reference:
    - src/infrastructure/kms/credential_envelope.py
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EncryptedCredentials:
    """Immutable encrypted credential blob.

    Attributes:
        ciphertext: Envelope output (IV || ciphertext || auth tag).

    Example:
        >>> blob = EncryptedCredentials(ciphertext=b"...")
        >>> repr(blob)
        'EncryptedCredentials(ciphertext=<3 bytes>)'
    """

    ciphertext: bytes

    def __post_init__(self) -> None:
        """Validate ciphertext is non-empty bytes.

        Raises:
            ValueError: If ciphertext is empty or not bytes.
        """
        if not isinstance(self.ciphertext, bytes):
            raise ValueError("ciphertext must be bytes")
        if not self.ciphertext:
            raise ValueError("ciphertext cannot be empty")

    def __repr__(self) -> str:
        # Never expose ciphertext contents in logs
        return f"EncryptedCredentials(ciphertext=<{len(self.ciphertext)} bytes>)"

    def __len__(self) -> int:
        return len(self.ciphertext)
