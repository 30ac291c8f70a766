"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.actor import OrgServiceActor
from src.domain.value_objects.encrypted_credentials import EncryptedCredentials

__all__ = [
    "EncryptedCredentials",
    "OrgServiceActor",
]
