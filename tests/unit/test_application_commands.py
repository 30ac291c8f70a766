"""Unit tests for app connection commands."""

import pytest
from uuid_extensions import uuid7

from src.application.commands import CreateAppConnection, UpdateAppConnection
from src.domain.enums import AppConnectionApp


@pytest.mark.unit
class TestCreateAppConnection:
    """Test CreateAppConnection."""

    def test_repr_hides_credentials(self):
        """Test credentials are excluded from repr."""
        command = CreateAppConnection(
            app=AppConnectionApp.AWS,
            method="access-token",
            name="prod",
            credentials={"accessToken": "AKIA-secret"},
        )

        assert "AKIA-secret" not in repr(command)
        assert command.description is None


@pytest.mark.unit
class TestUpdateAppConnection:
    """Test UpdateAppConnection.updated_fields."""

    def test_no_fields(self):
        """Test an empty update supplies nothing."""
        command = UpdateAppConnection(app=AppConnectionApp.AWS, connection_id=uuid7())

        assert command.updated_fields == ()

    def test_all_fields_in_order(self):
        """Test supplied fields are listed in declaration order."""
        command = UpdateAppConnection(
            app=AppConnectionApp.GITHUB,
            connection_id=uuid7(),
            credentials={"accessToken": "t"},
            name="n",
            description="d",
        )

        assert command.updated_fields == ("name", "description", "credentials")

    def test_empty_string_description_counts(self):
        """Test an explicit empty description is still a supplied field."""
        command = UpdateAppConnection(
            app=AppConnectionApp.AWS, connection_id=uuid7(), description=""
        )

        assert command.updated_fields == ("description",)

    def test_clear_description_counts(self):
        """Test clearing the description is reported as a description change."""
        command = UpdateAppConnection(
            app=AppConnectionApp.AWS, connection_id=uuid7(), clear_description=True
        )

        assert command.updated_fields == ("description",)

    def test_repr_hides_credentials(self):
        """Test replacement credentials are excluded from repr."""
        command = UpdateAppConnection(
            app=AppConnectionApp.AWS,
            connection_id=uuid7(),
            credentials={"role": "arn:aws:iam::1:role/secret"},
        )

        assert "arn:aws" not in repr(command)
