"""Permission service protocol (port).

Resolves what an actor may do inside a target organization. The connection
service asks for a permission set once per operation, then checks one
(action, subject) pair on it.

Rule: for operations on an existing row, target_org_id is the row's
org_id. The actor's claimed org is passed separately so implementations can
deny actors acting outside their own organization.

Implementations:
    - CasbinPermissionService: src/infrastructure/authorization/casbin_adapter.py
"""

from typing import Protocol
from uuid import UUID

from src.core.errors import AuthorizationError
from src.core.result import Result
from src.domain.enums import ActorType, OrgPermissionAction, OrgPermissionSubject


class OrgPermissionProtocol(Protocol):
    """Resolved permission set of one actor in one organization."""

    def can(self, action: OrgPermissionAction, subject: OrgPermissionSubject) -> bool:
        """Check whether action on subject is allowed."""
        ...

    def ensure_can(
        self,
        action: OrgPermissionAction,
        subject: OrgPermissionSubject,
    ) -> Result[None, AuthorizationError]:
        """Require action on subject.

        Returns:
            Success(None) if allowed.
            Failure(AuthorizationError) (Forbidden) otherwise.
        """
        ...


class PermissionServiceProtocol(Protocol):
    """Protocol for permission resolution."""

    async def get_org_permission(
        self,
        *,
        actor_type: ActorType,
        actor_id: UUID,
        actor_org_id: UUID,
        actor_auth_method: str | None,
        target_org_id: UUID,
    ) -> OrgPermissionProtocol:
        """Resolve the permission set of an actor in target_org_id.

        Args:
            actor_type: Kind of actor.
            actor_id: Actor identifier.
            actor_org_id: Organization the actor is authenticated into.
            actor_auth_method: How the actor authenticated.
            target_org_id: Organization owning the resource.

        Returns:
            Permission set. An empty set (everything denied) when the actor
            has no role in target_org_id.
        """
        ...
