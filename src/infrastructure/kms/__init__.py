"""Key management and credential encryption adapters."""

from src.infrastructure.kms.aes_gcm_cipher import AesGcmCipher
from src.infrastructure.kms.credential_envelope import CredentialEnvelope
from src.infrastructure.kms.local_kms_adapter import LocalKmsAdapter

__all__ = [
    "AesGcmCipher",
    "CredentialEnvelope",
    "LocalKmsAdapter",
]
