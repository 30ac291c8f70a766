"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers branch
on the variant explicitly, which keeps failure paths visible and testable.

Usage:
    def find_connection(connection_id: UUID) -> Result[AppConnection, NotFoundError]:
        ...

    match await service.find_by_id(app, connection_id, actor):
        case Success(value=connection):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred (usually a DomainError).
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
