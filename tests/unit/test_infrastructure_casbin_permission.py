"""Unit tests for CasbinPermissionService.

Uses an in-memory casbin.Enforcer loaded with the bundled model.conf.

Tests cover:
- Role grants scoped to one organization
- Admin vs member actions
- Cross-organization requests denied without consulting policies
- Fail-closed behavior on enforcer errors
"""

from unittest.mock import MagicMock

import pytest
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError
from src.core.result import Failure, Success
from src.domain.enums import (
    ActorType,
    OrgPermissionAction,
    OrgPermissionSubject,
    OrgRole,
)
from src.domain.value_objects import OrgServiceActor
from src.infrastructure.authorization import CasbinOrgPermission, build_subject
from tests.conftest import grant_role

SUBJECT = OrgPermissionSubject.APP_CONNECTIONS


async def _permission(service, actor, target_org_id=None):
    return await service.get_org_permission(
        actor_type=actor.type,
        actor_id=actor.id,
        actor_org_id=actor.org_id,
        actor_auth_method=actor.auth_method,
        target_org_id=target_org_id or actor.org_id,
    )


@pytest.mark.unit
class TestBuildSubject:
    """Test subject formatting."""

    def test_subject_format(self):
        """Test subject is '<type>:<id>'."""
        actor_id = uuid7()

        assert build_subject(ActorType.SERVICE, actor_id) == f"service:{actor_id}"


@pytest.mark.unit
class TestOrgPermission:
    """Test permission resolution inside an organization."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("action", list(OrgPermissionAction))
    async def test_admin_can_do_everything(self, permission_service, admin, action):
        """Test admin holds every action on app connections."""
        permission = await _permission(permission_service, admin)

        assert permission.can(action, SUBJECT)

    @pytest.mark.asyncio
    async def test_member_can_only_read(self, permission_service, member):
        """Test member has read but no write actions."""
        permission = await _permission(permission_service, member)

        assert permission.can(OrgPermissionAction.READ, SUBJECT)
        assert not permission.can(OrgPermissionAction.CREATE, SUBJECT)
        assert not permission.can(OrgPermissionAction.EDIT, SUBJECT)
        assert not permission.can(OrgPermissionAction.DELETE, SUBJECT)

    @pytest.mark.asyncio
    async def test_actor_without_role_denied(self, permission_service, org_id):
        """Test an actor with no grouping rule has no permissions."""
        stranger = OrgServiceActor(type=ActorType.USER, id=uuid7(), org_id=org_id)

        permission = await _permission(permission_service, stranger)

        assert not permission.can(OrgPermissionAction.READ, SUBJECT)

    @pytest.mark.asyncio
    async def test_role_in_other_org_does_not_apply(self, permission_service, enforcer):
        """Test admin of org B has no rights when authenticated into org A."""
        # Arrange
        actor = OrgServiceActor(type=ActorType.USER, id=uuid7(), org_id=uuid7())
        grant_role(enforcer, actor, OrgRole.ADMIN, org_id=uuid7())

        # Act
        permission = await _permission(permission_service, actor)

        # Assert
        assert not permission.can(OrgPermissionAction.READ, SUBJECT)

    @pytest.mark.asyncio
    async def test_ensure_can_success(self, permission_service, admin):
        """Test ensure_can returns Success(None) when allowed."""
        permission = await _permission(permission_service, admin)

        result = permission.ensure_can(OrgPermissionAction.DELETE, SUBJECT)

        assert result == Success(value=None)

    @pytest.mark.asyncio
    async def test_ensure_can_forbidden(self, permission_service, member):
        """Test ensure_can returns AuthorizationError naming the permission."""
        permission = await _permission(permission_service, member)

        result = permission.ensure_can(OrgPermissionAction.DELETE, SUBJECT)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert result.error.code == ErrorCode.PERMISSION_DENIED
        assert result.error.message == "You are not allowed to delete app-connections"
        assert result.error.required_permission == "delete:app-connections"


@pytest.mark.unit
class TestCrossOrganization:
    """Test requests targeting another organization."""

    @pytest.mark.asyncio
    async def test_cross_org_denied_even_with_role(
        self, permission_service, enforcer, admin, mock_logger
    ):
        """Test an admin of both orgs is denied when acting from the other one."""
        # Arrange
        other_org = uuid7()
        grant_role(enforcer, admin, OrgRole.ADMIN, org_id=other_org)

        # Act
        permission = await _permission(permission_service, admin, other_org)

        # Assert
        assert not permission.can(OrgPermissionAction.READ, SUBJECT)
        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args.args[0] == "cross_org_access_denied"
        assert mock_logger.warning.call_args.kwargs["target_org_id"] == str(other_org)

    @pytest.mark.asyncio
    async def test_same_org_not_logged(self, permission_service, admin, mock_logger):
        """Test a normal in-org request logs no warning."""
        await _permission(permission_service, admin)

        mock_logger.warning.assert_not_called()


@pytest.mark.unit
class TestFailClosed:
    """Test enforcer errors."""

    def test_enforcer_exception_denies(self):
        """Test an exception from the enforcer is logged and denies."""
        # Arrange
        enforcer = MagicMock()
        enforcer.enforce.side_effect = RuntimeError("policy store down")
        logger = MagicMock()
        permission = CasbinOrgPermission(enforcer, "user:1", uuid7(), logger)

        # Act
        allowed = permission.can(OrgPermissionAction.READ, SUBJECT)

        # Assert
        assert allowed is False
        logger.error.assert_called_once()
        assert logger.error.call_args.args[0] == "authorization_check_error"
