"""Casbin implementation of PermissionServiceProtocol.

Organization-scoped RBAC with a Casbin domain model (model.conf):

    request:  (subject, org_id, object, action)
    subject:  "<actor_type>:<actor_id>"        e.g. "user:0192..."
    grouping: g, user:0192..., admin, <org_id>  (role inside one org)
    policy:   p, admin, *, app-connections, edit ("*" = every org)

Roles are granted per organization, so an admin of org A has no rights in
org B. An actor acting outside the organization it authenticated into gets
an empty permission set.

Following hexagonal architecture:
- Infrastructure implements domain protocols
- Domain doesn't know about Casbin
"""

from pathlib import Path
from typing import TYPE_CHECKING
from uuid import UUID

import casbin

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Result, Success
from src.domain.enums import ActorType, OrgPermissionAction, OrgPermissionSubject

if TYPE_CHECKING:
    from src.domain.protocols.logger_protocol import LoggerProtocol


MODEL_PATH = Path(__file__).parent / "model.conf"


def build_subject(actor_type: ActorType, actor_id: UUID) -> str:
    """Casbin subject string for an actor."""
    return f"{actor_type.value}:{actor_id}"


class CasbinOrgPermission:
    """Permission set of one actor inside one organization.

    Checks are evaluated against the enforcer on demand. enforce() is
    synchronous in Casbin, even on AsyncEnforcer.
    """

    def __init__(
        self,
        enforcer: casbin.Enforcer,
        subject: str,
        org_id: UUID,
        logger: "LoggerProtocol",
        *,
        deny_all: bool = False,
    ) -> None:
        self._enforcer = enforcer
        self._subject = subject
        self._org_id = org_id
        self._logger = logger
        self._deny_all = deny_all

    def can(self, action: OrgPermissionAction, subject: OrgPermissionSubject) -> bool:
        """Check whether action on subject is allowed in this organization."""
        if self._deny_all:
            return False
        try:
            allowed = self._enforcer.enforce(
                self._subject, str(self._org_id), subject.value, action.value
            )
        except Exception as e:
            # Fail closed on enforcer errors
            self._logger.error(
                "authorization_check_error",
                error=e,
                subject=self._subject,
                org_id=str(self._org_id),
                object=subject.value,
                action=action.value,
            )
            return False
        return bool(allowed)

    def ensure_can(
        self,
        action: OrgPermissionAction,
        subject: OrgPermissionSubject,
    ) -> Result[None, AuthorizationError]:
        """Require action on subject.

        Returns:
            Success(None) if allowed, Failure(AuthorizationError) otherwise.
        """
        allowed = self.can(action, subject)
        self._logger.debug(
            "authorization_check",
            subject=self._subject,
            org_id=str(self._org_id),
            object=subject.value,
            action=action.value,
            allowed=allowed,
        )
        if allowed:
            return Success(value=None)
        return Failure(
            error=AuthorizationError(
                code=ErrorCode.PERMISSION_DENIED,
                message=f"You are not allowed to {action.value} {subject.value}",
                required_permission=f"{action.value}:{subject.value}",
            )
        )


class CasbinPermissionService:
    """Casbin-based permission service.

    Note:
        The enforcer is initialized at FastAPI startup (async required).
        See src/main.py lifespan context manager for initialization.

    Attributes:
        _enforcer: Casbin enforcer (AsyncEnforcer in production,
            in-memory Enforcer in tests).
        _logger: Structured logger.
    """

    def __init__(
        self,
        enforcer: casbin.Enforcer,
        logger: "LoggerProtocol",
    ) -> None:
        self._enforcer = enforcer
        self._logger = logger

    async def get_org_permission(
        self,
        *,
        actor_type: ActorType,
        actor_id: UUID,
        actor_org_id: UUID,
        actor_auth_method: str | None,
        target_org_id: UUID,
    ) -> CasbinOrgPermission:
        """Resolve the permission set of an actor in target_org_id.

        Args:
            actor_type: Kind of actor.
            actor_id: Actor identifier.
            actor_org_id: Organization the actor is authenticated into.
            actor_auth_method: How the actor authenticated (logged only).
            target_org_id: Organization owning the resource.

        Returns:
            CasbinOrgPermission. Denies everything when the actor targets an
            organization other than the one it authenticated into.
        """
        subject = build_subject(actor_type, actor_id)
        deny_all = actor_org_id != target_org_id
        if deny_all:
            self._logger.warning(
                "cross_org_access_denied",
                subject=subject,
                actor_org_id=str(actor_org_id),
                target_org_id=str(target_org_id),
                auth_method=actor_auth_method,
            )
        return CasbinOrgPermission(
            self._enforcer,
            subject,
            target_org_id,
            self._logger,
            deny_all=deny_all,
        )
