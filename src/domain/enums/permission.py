"""Organization permission components for RBAC authorization.

Permissions are (action, subject) pairs evaluated inside an organization,
e.g. ("create", "app-connections") in org 0192...

Usage:
    from src.domain.enums import OrgPermissionAction, OrgPermissionSubject

    result = permission.ensure_can(
        OrgPermissionAction.CREATE,
        OrgPermissionSubject.APP_CONNECTIONS,
    )
"""

from enum import Enum


class OrgPermissionSubject(str, Enum):
    """Resources protected by organization permissions.

    String Enum:
        Values match the object column of Casbin policies.
    """

    APP_CONNECTIONS = "app-connections"


class OrgPermissionAction(str, Enum):
    """Actions that can be performed on an organization resource."""

    READ = "read"
    CREATE = "create"
    EDIT = "edit"
    DELETE = "delete"


class OrgRole(str, Enum):
    """Default organization roles seeded into the policy store.

    Role assignments are scoped to one organization (Casbin domain).
    """

    ADMIN = "admin"
    """Full access to app connections."""

    MEMBER = "member"
    """Read-only access to app connections."""
