"""Actor value object.

Identity of the caller performing an app connection operation.

The claimed ``org_id`` is the organization the actor is authenticated into.
It is an input to permission resolution only; it never selects which
organization a stored connection belongs to.
"""

from dataclasses import dataclass
from uuid import UUID

from src.domain.enums import ActorType


@dataclass(frozen=True, slots=True, kw_only=True)
class OrgServiceActor:
    """Authenticated caller.

    Attributes:
        type: Kind of actor (user, service, identity).
        id: Actor identifier.
        org_id: Organization the actor is authenticated into.
        auth_method: How the actor authenticated (e.g. "jwt", "api-key").
            None when not applicable.
    """

    type: ActorType
    id: UUID
    org_id: UUID
    auth_method: str | None = None

    @property
    def subject(self) -> str:
        """Authorization subject string (``"<type>:<id>"``)."""
        return f"{self.type.value}:{self.id}"
