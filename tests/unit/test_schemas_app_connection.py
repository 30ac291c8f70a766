"""Unit tests for app connection API schemas.

Tests cover:
- Name slug pattern and length limits
- Update requests ignoring app/method
- Option and sanitized-connection conversion
"""

from datetime import UTC, datetime

import pytest
from pydantic import ValidationError
from uuid_extensions import uuid7

from src.application.services import SanitizedAppConnection
from src.domain.connections import list_connection_options
from src.schemas.app_connection_schemas import (
    AppConnectionOptionResponse,
    AppConnectionResponse,
    CreateAppConnectionRequest,
    UpdateAppConnectionRequest,
)


def _create(**overrides) -> CreateAppConnectionRequest:
    fields = {
        "name": "prod-aws",
        "method": "assume-role",
        "credentials": {"role": "arn:aws:iam::1:role/x"},
    }
    fields.update(overrides)
    return CreateAppConnectionRequest(**fields)


@pytest.mark.unit
class TestNameValidation:
    """Test the slug rule on connection names."""

    @pytest.mark.parametrize("name", ["prod", "prod-aws", "ci_1", "a", "a" * 32])
    def test_valid_names(self, name):
        assert _create(name=name).name == name

    @pytest.mark.parametrize(
        "name",
        ["", "Prod", "prod aws", "-prod", "prod-", "prod--aws", "prod.aws", "a" * 33],
    )
    def test_invalid_names(self, name):
        with pytest.raises(ValidationError):
            _create(name=name)

    def test_update_name_uses_same_rule(self):
        with pytest.raises(ValidationError):
            UpdateAppConnectionRequest(name="Not A Slug")


@pytest.mark.unit
class TestUpdateRequest:
    """Test partial update requests."""

    def test_all_fields_optional(self):
        request = UpdateAppConnectionRequest()

        assert request.name is None
        assert request.credentials is None
        assert request.description is None

    def test_app_and_method_ignored(self):
        """Test immutable fields sent by a client are dropped."""
        request = UpdateAppConnectionRequest.model_validate(
            {"name": "renamed", "app": "github", "method": "oauth"}
        )

        assert request.name == "renamed"
        assert "app" not in request.model_dump()
        assert "method" not in request.model_dump()

    def test_explicit_null_description_clears(self):
        """Test only an explicit null asks to remove the description."""
        assert UpdateAppConnectionRequest.model_validate(
            {"description": None}
        ).clears_description
        assert not UpdateAppConnectionRequest.model_validate({}).clears_description
        assert not UpdateAppConnectionRequest(description="d").clears_description


@pytest.mark.unit
class TestResponses:
    """Test response conversion helpers."""

    def test_from_option(self):
        aws = next(o for o in list_connection_options() if o.app.value == "aws")

        response = AppConnectionOptionResponse.from_option(aws)

        assert response.app == "aws"
        assert response.name == "AWS"
        assert response.methods == ["assume-role", "access-token"]

    def test_from_sanitized(self):
        now = datetime.now(UTC)
        sanitized = SanitizedAppConnection(
            id=uuid7(),
            org_id=uuid7(),
            name="ci",
            description=None,
            app="github",
            method="oauth",
            version=2,
            created_at=now,
            updated_at=now,
        )

        response = AppConnectionResponse.from_sanitized(sanitized)

        assert response.app == "github"
        assert response.credentials == {}
        assert response.version == 2
