"""Kinds of identities that can act on organization resources."""

from enum import Enum


class ActorType(str, Enum):
    """Type of the acting identity.

    Used together with the actor id to build the authorization subject
    (``"user:<id>"``).
    """

    USER = "user"
    SERVICE = "service"
    IDENTITY = "identity"
