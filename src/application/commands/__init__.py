"""Application commands (write operations)."""

from src.application.commands.app_connection_commands import (
    CreateAppConnection,
    UpdateAppConnection,
)

__all__ = [
    "CreateAppConnection",
    "UpdateAppConnection",
]
