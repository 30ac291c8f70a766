"""Unit tests for the SQLAlchemy AppConnectionRepository.

Uses a mocked AsyncSession; query building is exercised, SQL execution is
not.

Tests cover:
- Model <-> entity mapping
- Unique constraint violations returned as ConflictError
- Partial updates and version bump on credential replacement
- Hard delete
"""

from datetime import UTC, datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import IntegrityError
from uuid_extensions import uuid7

from src.core.enums import ErrorCode
from src.core.errors import ConflictError, NotFoundError
from src.core.result import Failure, Success
from src.domain.entities import AppConnectionRecord
from src.domain.enums import AppConnectionApp
from src.domain.value_objects import EncryptedCredentials
from src.infrastructure.persistence.models import AppConnectionModel
from src.infrastructure.persistence.repositories import AppConnectionRepository


def _model(**overrides) -> AppConnectionModel:
    now = datetime.now(UTC)
    fields = {
        "id": uuid7(),
        "org_id": uuid7(),
        "name": "prod-aws",
        "description": None,
        "app": "aws",
        "method": "assume-role",
        "encrypted_credentials": b"\x01" * 40,
        "version": 1,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return AppConnectionModel(**fields)


def _returning_one(session, model):
    result = MagicMock()
    result.scalar_one_or_none.return_value = model
    session.execute = AsyncMock(return_value=result)


@pytest.fixture
def mock_session():
    session = MagicMock()
    session.add = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.delete = AsyncMock()
    return session


@pytest.mark.unit
class TestReads:
    """Test find, find_by_id, find_by_name."""

    @pytest.mark.asyncio
    async def test_find_maps_models(self, mock_session):
        """Test rows become AppConnectionRecord entities."""
        # Arrange
        model = _model(description="Deploy")
        result = MagicMock()
        result.scalars.return_value.all.return_value = [model]
        mock_session.execute = AsyncMock(return_value=result)
        repo = AppConnectionRepository(mock_session)

        # Act
        records = await repo.find(model.org_id, AppConnectionApp.AWS)

        # Assert
        assert len(records) == 1
        record = records[0]
        assert isinstance(record, AppConnectionRecord)
        assert record.id == model.id
        assert record.app is AppConnectionApp.AWS
        assert record.description == "Deploy"
        assert record.encrypted_credentials == EncryptedCredentials(
            ciphertext=b"\x01" * 40
        )

    @pytest.mark.asyncio
    async def test_find_by_id_missing(self, mock_session):
        """Test None when no row matches."""
        _returning_one(mock_session, None)

        assert await AppConnectionRepository(mock_session).find_by_id(uuid7()) is None

    @pytest.mark.asyncio
    async def test_find_by_name(self, mock_session):
        """Test lookup by (org, name)."""
        model = _model(app="github", method="oauth", name="ci")
        _returning_one(mock_session, model)

        record = await AppConnectionRepository(mock_session).find_by_name(
            model.org_id, "ci"
        )

        assert record is not None
        assert record.app is AppConnectionApp.GITHUB
        assert record.method == "oauth"


@pytest.mark.unit
class TestCreate:
    """Test create."""

    @pytest.mark.asyncio
    async def test_create_success(self, mock_session):
        """Test insert, commit and refresh."""
        # Arrange
        now = datetime.now(UTC)

        async def refresh(model):
            model.id = uuid7()
            model.created_at = now
            model.updated_at = now

        mock_session.refresh = AsyncMock(side_effect=refresh)
        repo = AppConnectionRepository(mock_session)
        org_id = uuid7()

        # Act
        result = await repo.create(
            org_id=org_id,
            name="prod",
            app=AppConnectionApp.AWS,
            method="access-token",
            encrypted_credentials=EncryptedCredentials(ciphertext=b"\x02" * 40),
            description="d",
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.org_id == org_id
        assert result.value.version == 1
        assert result.value.created_at == now
        added = mock_session.add.call_args.args[0]
        assert added.app == "aws"
        assert added.encrypted_credentials == b"\x02" * 40
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_unique_violation(self, mock_session):
        """Test a duplicate name rolls back and returns ConflictError."""
        mock_session.commit = AsyncMock(
            side_effect=IntegrityError("INSERT", {}, Exception("uq_app_connections_org_name"))
        )
        repo = AppConnectionRepository(mock_session)

        result = await repo.create(
            org_id=uuid7(),
            name="dup",
            app=AppConnectionApp.AWS,
            method="assume-role",
            encrypted_credentials=EncryptedCredentials(ciphertext=b"\x02" * 40),
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.APP_CONNECTION_NAME_ALREADY_EXISTS
        assert result.error.conflicting_field == "name"
        mock_session.rollback.assert_awaited_once()
        mock_session.refresh.assert_not_awaited()


@pytest.mark.unit
class TestUpdate:
    """Test update_by_id."""

    @pytest.mark.asyncio
    async def test_update_metadata_only(self, mock_session):
        """Test name/description change without touching credentials."""
        model = _model()
        _returning_one(mock_session, model)

        result = await AppConnectionRepository(mock_session).update_by_id(
            model.id, name="renamed", description="new"
        )

        assert isinstance(result, Success)
        assert model.name == "renamed"
        assert model.description == "new"
        assert model.version == 1
        assert model.encrypted_credentials == b"\x01" * 40

    @pytest.mark.asyncio
    async def test_update_clears_description(self, mock_session):
        """Test clear_description writes NULL and wins over a new value."""
        model = _model(description="Deploy role")
        _returning_one(mock_session, model)

        result = await AppConnectionRepository(mock_session).update_by_id(
            model.id, description="ignored", clear_description=True
        )

        assert isinstance(result, Success)
        assert model.description is None
        assert model.version == 1

    @pytest.mark.asyncio
    async def test_update_credentials_bumps_version(self, mock_session):
        """Test replacing credentials increments version."""
        model = _model(version=4)
        _returning_one(mock_session, model)

        result = await AppConnectionRepository(mock_session).update_by_id(
            model.id,
            encrypted_credentials=EncryptedCredentials(ciphertext=b"\x03" * 40),
        )

        assert result.value.version == 5
        assert model.encrypted_credentials == b"\x03" * 40

    @pytest.mark.asyncio
    async def test_update_missing_row(self, mock_session):
        """Test NotFoundError when the row is gone."""
        _returning_one(mock_session, None)
        connection_id = uuid7()

        result = await AppConnectionRepository(mock_session).update_by_id(
            connection_id, name="x"
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.resource_type == "app_connection"
        assert result.error.resource_id == str(connection_id)

    @pytest.mark.asyncio
    async def test_update_unique_violation(self, mock_session):
        """Test renaming onto a taken name returns ConflictError."""
        _returning_one(mock_session, _model())
        mock_session.commit = AsyncMock(
            side_effect=IntegrityError("UPDATE", {}, Exception("unique"))
        )

        result = await AppConnectionRepository(mock_session).update_by_id(
            uuid7(), name="taken"
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        mock_session.rollback.assert_awaited_once()


@pytest.mark.unit
class TestDelete:
    """Test delete_by_id."""

    @pytest.mark.asyncio
    async def test_delete_returns_row(self, mock_session):
        """Test the deleted row is returned."""
        model = _model()
        _returning_one(mock_session, model)

        record = await AppConnectionRepository(mock_session).delete_by_id(model.id)

        assert record is not None
        assert record.id == model.id
        mock_session.delete.assert_awaited_once_with(model)
        mock_session.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing(self, mock_session):
        """Test None when nothing was deleted."""
        _returning_one(mock_session, None)

        assert await AppConnectionRepository(mock_session).delete_by_id(uuid7()) is None
        mock_session.delete.assert_not_awaited()
