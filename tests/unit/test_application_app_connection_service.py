"""Unit tests for AppConnectionService.

The service runs on real encryption (CredentialEnvelope + LocalKmsAdapter)
and real authorization (CasbinPermissionService over an in-memory enforcer).
Only persistence and the event bus are doubles.

Tests cover:
- list_by_org / find_by_id / find_by_name
- create / update / delete
- Permission checks evaluated in the row's organization
- App mismatch between route and stored row
- Name uniqueness within an organization
- Corrupted stored credentials
- 3-state events on every write, completion events on reads
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateAppConnection, UpdateAppConnection
from src.core.enums import ErrorCode
from src.core.errors import AuthorizationError, NotFoundError, ValidationError
from src.core.result import Failure, Success
from src.domain.enums import (
    ActorType,
    AppConnectionApp,
    GitHubConnectionMethod,
    OrgRole,
)
from src.domain.events import (
    AppConnectionCreationAttempted,
    AppConnectionCreationFailed,
    AppConnectionCreationSucceeded,
    AppConnectionDeletionAttempted,
    AppConnectionDeletionFailed,
    AppConnectionDeletionSucceeded,
    AppConnectionsListed,
    AppConnectionUpdateAttempted,
    AppConnectionUpdateFailed,
    AppConnectionUpdateSucceeded,
    AppConnectionViewed,
)
from src.domain.protocols import DecryptionError
from src.domain.value_objects import EncryptedCredentials, OrgServiceActor
from tests.conftest import grant_role, published_events

AWS = AppConnectionApp.AWS
GITHUB = AppConnectionApp.GITHUB
ROLE_ARN = "arn:aws:iam::123456789012:role/deploy"


def _create_aws(name: str = "prod-aws", **overrides) -> CreateAppConnection:
    fields = {
        "app": AWS,
        "method": "assume-role",
        "name": name,
        "credentials": {"role": ROLE_ARN},
    }
    fields.update(overrides)
    return CreateAppConnection(**fields)


def _create_github(name: str = "ci-github") -> CreateAppConnection:
    return CreateAppConnection(
        app=GITHUB,
        method="oauth",
        name=name,
        credentials={"accessToken": "gho_secret"},
    )


async def _seed(service, actor, command):
    result = await service.create(command, actor)
    assert isinstance(result, Success), result
    return result.value


def _foreign_admin(enforcer) -> OrgServiceActor:
    actor = OrgServiceActor(type=ActorType.USER, id=uuid7(), org_id=uuid7())
    grant_role(enforcer, actor, OrgRole.ADMIN)
    return actor


# =============================================================================
# Create
# =============================================================================


@pytest.mark.unit
class TestCreate:
    """Test AppConnectionService.create."""

    @pytest.mark.asyncio
    async def test_create_success(self, service, admin, repository):
        """Test creation stores ciphertext and returns plaintext credentials."""
        # Act
        result = await service.create(_create_aws(description="Deploy role"), admin)

        # Assert
        assert isinstance(result, Success)
        connection = result.value
        assert connection.org_id == admin.org_id
        assert connection.app == AWS
        assert connection.method == "assume-role"
        assert connection.credentials == {"role": ROLE_ARN}
        assert connection.description == "Deploy role"
        assert connection.version == 1

        stored = repository.rows[connection.id]
        assert isinstance(stored.encrypted_credentials, EncryptedCredentials)
        assert ROLE_ARN.encode() not in stored.encrypted_credentials.ciphertext

    @pytest.mark.asyncio
    async def test_create_stores_registry_method_value(self, service, admin, repository):
        """Test an enum method is persisted as the registry's method string."""
        result = await service.create(
            CreateAppConnection(
                app=GITHUB,
                method=GitHubConnectionMethod.APP,
                name="gh-app",
                credentials={"role": "installation-1"},
            ),
            admin,
        )

        assert isinstance(result, Success)
        stored = repository.rows[result.value.id]
        assert stored.method == "github-app"
        assert type(stored.method) is str

    @pytest.mark.asyncio
    async def test_create_emits_attempted_and_succeeded(
        self, service, admin, mock_event_bus
    ):
        """Test 3-state events for a successful creation."""
        connection = await _seed(service, admin, _create_aws())

        events = published_events(mock_event_bus)
        assert [type(e) for e in events] == [
            AppConnectionCreationAttempted,
            AppConnectionCreationSucceeded,
        ]
        assert events[0].name == "prod-aws"
        assert events[0].actor_type == "user"
        assert events[0].org_id == admin.org_id
        assert events[1].connection_id == connection.id
        assert events[1].app == "aws"

    @pytest.mark.asyncio
    async def test_events_never_carry_credentials(self, service, admin, mock_event_bus):
        """Test no published event contains the secret."""
        await _seed(service, admin, _create_aws())

        for event in published_events(mock_event_bus):
            assert ROLE_ARN not in repr(event)

    @pytest.mark.asyncio
    async def test_create_forbidden_for_member(
        self, service, member, repository, mock_event_bus
    ):
        """Test member cannot create; Failed event records the reason."""
        # Act
        result = await service.create(_create_aws(), member)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert repository.rows == {}

        events = published_events(mock_event_bus)
        assert isinstance(events[-1], AppConnectionCreationFailed)
        assert events[-1].reason == ErrorCode.PERMISSION_DENIED.value

    @pytest.mark.asyncio
    async def test_create_invalid_credentials(self, service, admin, repository):
        """Test credentials failing the variant schema are a ValidationError."""
        result = await service.create(
            _create_aws(credentials={"accessToken": "x"}), admin
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.APP_CONNECTION_CREDENTIALS_INVALID
        assert repository.rows == {}

    @pytest.mark.asyncio
    async def test_create_unsupported_method(self, service, admin):
        """Test a method of another app is rejected."""
        result = await service.create(
            _create_aws(method="oauth", credentials={"accessToken": "x"}), admin
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_CONNECTION_METHOD_UNSUPPORTED
        assert result.error.field == "method"

    @pytest.mark.asyncio
    async def test_create_duplicate_name(self, service, admin):
        """Test names are unique within an organization, across apps."""
        await _seed(service, admin, _create_aws(name="shared"))

        result = await service.create(_create_github(name="shared"), admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.APP_CONNECTION_NAME_ALREADY_EXISTS
        assert (
            result.error.message
            == 'An App Connection with the name "shared" already exists.'
        )

    @pytest.mark.asyncio
    async def test_same_name_in_other_org_allowed(self, service, admin, enforcer):
        """Test the same name can be used by two organizations."""
        other = _foreign_admin(enforcer)
        await _seed(service, admin, _create_aws(name="prod"))

        result = await service.create(_create_aws(name="prod"), other)

        assert isinstance(result, Success)
        assert result.value.org_id == other.org_id

    @pytest.mark.asyncio
    async def test_create_race_conflict_maps_to_name_taken(
        self, service, admin, repository
    ):
        """Test a unique-constraint conflict from storage reads like the pre-check."""
        # Arrange: pre-check passes, insert loses the race
        repository.find_by_name = AsyncMock(return_value=None)
        await _seed(service, admin, _create_aws(name="racy"))

        # Act
        result = await service.create(_create_aws(name="racy"), admin)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "name"

    @pytest.mark.asyncio
    async def test_create_unexpected_error_emits_failed_and_raises(
        self, service, admin, repository, mock_event_bus
    ):
        """Test storage exceptions propagate after a Failed event."""
        repository.create = AsyncMock(side_effect=ConnectionError("db gone"))

        with pytest.raises(ConnectionError):
            await service.create(_create_aws(), admin)

        events = published_events(mock_event_bus)
        assert isinstance(events[-1], AppConnectionCreationFailed)
        assert events[-1].reason == "ConnectionError"


# =============================================================================
# Reads
# =============================================================================


@pytest.mark.unit
class TestList:
    """Test AppConnectionService.list_by_org."""

    @pytest.mark.asyncio
    async def test_list_returns_decrypted_connections(self, service, admin, member):
        """Test members list every connection of their org."""
        aws = await _seed(service, admin, _create_aws())
        github = await _seed(service, admin, _create_github())

        result = await service.list_by_org(member)

        assert isinstance(result, Success)
        assert [c.id for c in result.value] == [aws.id, github.id]
        assert result.value[1].credentials == {"accessToken": "gho_secret"}

    @pytest.mark.asyncio
    async def test_list_filtered_by_app(self, service, admin):
        """Test the app filter."""
        await _seed(service, admin, _create_aws())
        github = await _seed(service, admin, _create_github())

        result = await service.list_by_org(admin, GITHUB)

        assert [c.id for c in result.value] == [github.id]

    @pytest.mark.asyncio
    async def test_list_empty(self, service, admin, mock_event_bus):
        """Test an org without connections gets an empty list and an event."""
        result = await service.list_by_org(admin)

        assert result == Success(value=[])
        (event,) = published_events(mock_event_bus)
        assert isinstance(event, AppConnectionsListed)
        assert event.count == 0
        assert event.app is None

    @pytest.mark.asyncio
    async def test_list_is_scoped_to_actor_org(self, service, admin, enforcer):
        """Test connections of another org are never listed."""
        await _seed(service, admin, _create_aws())
        other = _foreign_admin(enforcer)

        result = await service.list_by_org(other)

        assert result == Success(value=[])

    @pytest.mark.asyncio
    async def test_list_forbidden_without_role(self, service, org_id):
        """Test an actor without a role cannot list."""
        stranger = OrgServiceActor(type=ActorType.USER, id=uuid7(), org_id=org_id)

        result = await service.list_by_org(stranger)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)

    @pytest.mark.asyncio
    async def test_list_fails_on_corrupt_row(self, service, admin, repository):
        """Test one unreadable row fails the whole listing."""
        connection = await _seed(service, admin, _create_aws())
        repository.rows[connection.id].encrypted_credentials = EncryptedCredentials(
            ciphertext=b"\x00" * 40
        )

        result = await service.list_by_org(admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, DecryptionError)


@pytest.mark.unit
class TestFind:
    """Test find_by_id and find_by_name."""

    @pytest.mark.asyncio
    async def test_find_by_id(self, service, admin, member, mock_event_bus):
        """Test read by ID returns credentials and emits a view event."""
        created = await _seed(service, admin, _create_aws())
        mock_event_bus.publish.reset_mock()

        result = await service.find_by_id(AWS, created.id, member)

        assert isinstance(result, Success)
        assert result.value.credentials == {"role": ROLE_ARN}
        (event,) = published_events(mock_event_bus)
        assert isinstance(event, AppConnectionViewed)
        assert event.connection_id == created.id

    @pytest.mark.asyncio
    async def test_find_by_id_not_found(self, service, admin):
        """Test unknown IDs give NotFoundError with the fixed message."""
        missing = uuid7()

        result = await service.find_by_id(AWS, missing, admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == f"Could not find App Connection with ID {missing}"

    @pytest.mark.asyncio
    async def test_find_by_id_app_mismatch(self, service, admin):
        """Test a GitHub row read through the AWS route is rejected."""
        github = await _seed(service, admin, _create_github())

        result = await service.find_by_id(AWS, github.id, admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.code == ErrorCode.APP_CONNECTION_APP_MISMATCH
        assert (
            result.error.message
            == f'App Connection with ID {github.id} is not for App "aws"'
        )

    @pytest.mark.asyncio
    async def test_find_by_id_other_org_forbidden(self, service, admin, enforcer):
        """Test an ID from another org is Forbidden, not NotFound."""
        created = await _seed(service, admin, _create_aws())
        other = _foreign_admin(enforcer)

        result = await service.find_by_id(AWS, created.id, other)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)

    @pytest.mark.asyncio
    async def test_permission_checked_in_row_org(
        self, service, admin, enforcer, permission_service
    ):
        """Test the row's org, not the claimed org, is the permission target."""
        # Arrange
        created = await _seed(service, admin, _create_aws())
        other = _foreign_admin(enforcer)
        permission_service.get_org_permission = AsyncMock(
            wraps=permission_service.get_org_permission
        )

        # Act
        await service.find_by_id(AWS, created.id, other)

        # Assert
        kwargs = permission_service.get_org_permission.await_args.kwargs
        assert kwargs["target_org_id"] == admin.org_id
        assert kwargs["actor_org_id"] == other.org_id

    @pytest.mark.asyncio
    async def test_find_by_name(self, service, admin):
        """Test lookup by name within the actor's org."""
        created = await _seed(service, admin, _create_github(name="ci"))

        result = await service.find_by_name(GITHUB, "ci", admin)

        assert isinstance(result, Success)
        assert result.value.id == created.id

    @pytest.mark.asyncio
    async def test_find_by_name_not_found(self, service, admin):
        """Test unknown names give NotFoundError."""
        result = await service.find_by_name(AWS, "nope", admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.message == "Could not find App Connection with name nope"

    @pytest.mark.asyncio
    async def test_find_by_name_app_mismatch(self, service, admin):
        """Test name lookups also check the app."""
        await _seed(service, admin, _create_aws(name="infra"))

        result = await service.find_by_name(GITHUB, "infra", admin)

        assert isinstance(result, Failure)
        assert (
            result.error.message
            == 'App Connection with name infra is not for App "github"'
        )

    @pytest.mark.asyncio
    async def test_corrupt_credentials_reported(
        self, service, admin, repository, envelope, mock_logger
    ):
        """Test stored credentials not matching the variant are a DecryptionError."""
        # Arrange: valid ciphertext of the wrong shape
        created = await _seed(service, admin, _create_aws())
        blob = (await envelope.encrypt(admin.org_id, {"accessToken": "x"})).value
        repository.rows[created.id].encrypted_credentials = EncryptedCredentials(
            ciphertext=blob
        )

        # Act
        result = await service.find_by_id(AWS, created.id, admin)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, DecryptionError)
        assert result.error.code == ErrorCode.DECRYPTION_FAILED
        mock_logger.error.assert_called_once()
        assert mock_logger.error.call_args.args[0] == "app_connection_credentials_corrupted"

    @pytest.mark.asyncio
    async def test_list_connection_options(self, service):
        """Test options list both providers."""
        options = service.list_connection_options()

        assert {o.app for o in options} == {AWS, GITHUB}


# =============================================================================
# Update
# =============================================================================


@pytest.mark.unit
class TestUpdate:
    """Test AppConnectionService.update."""

    @pytest.mark.asyncio
    async def test_update_name_keeps_ciphertext(self, service, admin, repository):
        """Test updating metadata leaves credentials and version untouched."""
        # Arrange
        created = await _seed(service, admin, _create_aws())
        before = repository.rows[created.id].encrypted_credentials

        # Act
        result = await service.update(
            UpdateAppConnection(app=AWS, connection_id=created.id, name="renamed"),
            admin,
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.name == "renamed"
        assert result.value.credentials == {"role": ROLE_ARN}
        assert result.value.version == 1
        assert repository.rows[created.id].encrypted_credentials is before

    @pytest.mark.asyncio
    async def test_update_credentials_rotates(
        self, service, admin, repository, mock_event_bus
    ):
        """Test new credentials are re-encrypted and bump version."""
        created = await _seed(service, admin, _create_aws())
        mock_event_bus.publish.reset_mock()
        new_role = "arn:aws:iam::123456789012:role/other"

        result = await service.update(
            UpdateAppConnection(
                app=AWS, connection_id=created.id, credentials={"role": new_role}
            ),
            admin,
        )

        assert isinstance(result, Success)
        assert result.value.credentials == {"role": new_role}
        assert result.value.version == 2

        reread = await service.find_by_id(AWS, created.id, admin)
        assert reread.value.credentials == {"role": new_role}

        events = published_events(mock_event_bus)
        assert isinstance(events[0], AppConnectionUpdateAttempted)
        assert events[0].updated_fields == ("credentials",)
        assert isinstance(events[1], AppConnectionUpdateSucceeded)
        assert events[1].credentials_rotated is True

    @pytest.mark.asyncio
    async def test_update_clears_description(self, service, admin, mock_event_bus):
        """Test clear_description removes a stored description."""
        # Arrange
        created = await _seed(service, admin, _create_aws(description="Deploy role"))
        mock_event_bus.publish.reset_mock()

        # Act
        result = await service.update(
            UpdateAppConnection(
                app=AWS, connection_id=created.id, clear_description=True
            ),
            admin,
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.description is None
        reread = await service.find_by_id(AWS, created.id, admin)
        assert reread.value.description is None
        assert published_events(mock_event_bus)[0].updated_fields == ("description",)

    @pytest.mark.asyncio
    async def test_update_credentials_validated_against_stored_method(
        self, service, admin
    ):
        """Test replacement credentials must match the stored method."""
        created = await _seed(service, admin, _create_aws())

        result = await service.update(
            UpdateAppConnection(
                app=AWS, connection_id=created.id, credentials={"accessToken": "x"}
            ),
            admin,
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_CONNECTION_CREDENTIALS_INVALID

    @pytest.mark.asyncio
    async def test_update_forbidden_for_member(
        self, service, admin, member, mock_event_bus
    ):
        """Test member cannot edit; Failed event emitted."""
        created = await _seed(service, admin, _create_aws())

        result = await service.update(
            UpdateAppConnection(app=AWS, connection_id=created.id, name="x"),
            member,
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert isinstance(published_events(mock_event_bus)[-1], AppConnectionUpdateFailed)

    @pytest.mark.asyncio
    async def test_update_not_found(self, service, admin):
        """Test updating an unknown ID."""
        result = await service.update(
            UpdateAppConnection(app=AWS, connection_id=uuid7(), name="x"), admin
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_update_app_mismatch(self, service, admin, repository):
        """Test AWS credentials cannot be written into a GitHub row."""
        github = await _seed(service, admin, _create_github())
        before = repository.rows[github.id]

        result = await service.update(
            UpdateAppConnection(
                app=AWS, connection_id=github.id, credentials={"role": ROLE_ARN}
            ),
            admin,
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_CONNECTION_APP_MISMATCH
        assert repository.rows[github.id] is before

    @pytest.mark.asyncio
    async def test_update_name_taken(self, service, admin):
        """Test renaming onto an existing name."""
        await _seed(service, admin, _create_aws(name="first"))
        second = await _seed(service, admin, _create_aws(name="second"))

        result = await service.update(
            UpdateAppConnection(app=AWS, connection_id=second.id, name="first"),
            admin,
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.APP_CONNECTION_NAME_ALREADY_EXISTS

    @pytest.mark.asyncio
    async def test_update_same_name_is_not_conflict(self, service, admin):
        """Test re-submitting the current name is allowed."""
        created = await _seed(service, admin, _create_aws(name="same"))

        result = await service.update(
            UpdateAppConnection(
                app=AWS, connection_id=created.id, name="same", description="d"
            ),
            admin,
        )

        assert isinstance(result, Success)
        assert result.value.description == "d"

    @pytest.mark.asyncio
    async def test_update_other_org_forbidden(self, service, admin, enforcer):
        """Test an admin of another org cannot edit."""
        created = await _seed(service, admin, _create_aws())

        result = await service.update(
            UpdateAppConnection(app=AWS, connection_id=created.id, name="x"),
            _foreign_admin(enforcer),
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)

    @pytest.mark.asyncio
    async def test_update_unexpected_error_raises(
        self, service, admin, repository, mock_event_bus
    ):
        """Test storage exceptions propagate after a Failed event."""
        created = await _seed(service, admin, _create_aws())
        repository.update_by_id = AsyncMock(side_effect=TimeoutError())

        with pytest.raises(TimeoutError):
            await service.update(
                UpdateAppConnection(app=AWS, connection_id=created.id, name="x"),
                admin,
            )

        last = published_events(mock_event_bus)[-1]
        assert isinstance(last, AppConnectionUpdateFailed)
        assert last.reason == "TimeoutError"


# =============================================================================
# Delete
# =============================================================================


@pytest.mark.unit
class TestDelete:
    """Test AppConnectionService.delete."""

    @pytest.mark.asyncio
    async def test_delete_returns_last_state(
        self, service, admin, repository, mock_event_bus
    ):
        """Test deletion removes the row and returns it decrypted."""
        created = await _seed(service, admin, _create_aws())
        mock_event_bus.publish.reset_mock()

        result = await service.delete(AWS, created.id, admin)

        assert isinstance(result, Success)
        assert result.value.id == created.id
        assert result.value.credentials == {"role": ROLE_ARN}
        assert created.id not in repository.rows
        assert [type(e) for e in published_events(mock_event_bus)] == [
            AppConnectionDeletionAttempted,
            AppConnectionDeletionSucceeded,
        ]

    @pytest.mark.asyncio
    async def test_delete_app_mismatch_keeps_row(self, service, admin, repository):
        """Test deleting a GitHub row through the AWS route leaves it in place."""
        github = await _seed(service, admin, _create_github())

        result = await service.delete(AWS, github.id, admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert github.id in repository.rows

    @pytest.mark.asyncio
    async def test_delete_forbidden_for_member(
        self, service, admin, member, repository, mock_event_bus
    ):
        """Test member cannot delete."""
        created = await _seed(service, admin, _create_aws())

        result = await service.delete(AWS, created.id, member)

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert created.id in repository.rows
        last = published_events(mock_event_bus)[-1]
        assert isinstance(last, AppConnectionDeletionFailed)
        assert last.reason == ErrorCode.PERMISSION_DENIED.value

    @pytest.mark.asyncio
    async def test_delete_not_found(self, service, admin):
        """Test deleting an unknown ID."""
        result = await service.delete(AWS, uuid7(), admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_delete_concurrently_removed(self, service, admin, repository):
        """Test a row removed between lookup and delete is NotFound."""
        created = await _seed(service, admin, _create_aws())
        repository.delete_by_id = AsyncMock(return_value=None)

        result = await service.delete(AWS, created.id, admin)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)

    @pytest.mark.asyncio
    async def test_delete_other_org_forbidden(
        self, service, admin, enforcer, repository
    ):
        """Test an admin of another org cannot delete."""
        created = await _seed(service, admin, _create_aws())

        result = await service.delete(AWS, created.id, _foreign_admin(enforcer))

        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthorizationError)
        assert created.id in repository.rows

    @pytest.mark.asyncio
    async def test_delete_undecryptable_row_still_removed(
        self, service, admin, repository, mock_event_bus
    ):
        """Test a row with unreadable credentials can be deleted."""
        # Arrange
        created = await _seed(service, admin, _create_aws())
        repository.rows[created.id].encrypted_credentials = EncryptedCredentials(
            ciphertext=b"\x00" * 40
        )
        mock_event_bus.publish.reset_mock()

        # Act
        result = await service.delete(AWS, created.id, admin)

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, DecryptionError)
        assert created.id not in repository.rows
        last = published_events(mock_event_bus)[-1]
        assert isinstance(last, AppConnectionDeletionFailed)
        assert last.reason == ErrorCode.DECRYPTION_FAILED.value

    @pytest.mark.asyncio
    async def test_list_recovers_after_corrupt_row_deleted(
        self, service, admin, repository
    ):
        """Test removing the unreadable row makes the org listable again."""
        healthy = await _seed(service, admin, _create_github())
        corrupt = await _seed(service, admin, _create_aws())
        repository.rows[corrupt.id].encrypted_credentials = EncryptedCredentials(
            ciphertext=b"\x00" * 40
        )
        assert isinstance(await service.list_by_org(admin), Failure)

        await service.delete(AWS, corrupt.id, admin)
        result = await service.list_by_org(admin)

        assert isinstance(result, Success)
        assert [c.id for c in result.value] == [healthy.id]
