"""Domain enums for business logic.

Enums are centralized here for discoverability.

Available Enums:
    - AppConnectionApp: Supported providers (aws, github)
    - AwsConnectionMethod / GitHubConnectionMethod: Per-provider auth methods
    - ActorType: Kinds of acting identities
    - AuditAction: Audit trail action types
    - OrgPermissionAction / OrgPermissionSubject: Permission components
    - OrgRole: Default organization roles
"""

from src.domain.enums.actor_type import ActorType
from src.domain.enums.app_connection import (
    AppConnectionApp,
    AwsConnectionMethod,
    ConnectionMethod,
    GitHubConnectionMethod,
)
from src.domain.enums.audit_action import AuditAction
from src.domain.enums.permission import (
    OrgPermissionAction,
    OrgPermissionSubject,
    OrgRole,
)

__all__ = [
    "ActorType",
    "AppConnectionApp",
    "AuditAction",
    "AwsConnectionMethod",
    "ConnectionMethod",
    "GitHubConnectionMethod",
    "OrgPermissionAction",
    "OrgPermissionSubject",
    "OrgRole",
]
