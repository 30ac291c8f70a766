"""Repository dependency factories.

Request-scoped repository instances sharing the request's session.
"""

from typing import TYPE_CHECKING

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.core.container.infrastructure import get_db_session

if TYPE_CHECKING:
    from src.infrastructure.persistence.repositories import AppConnectionRepository


# ============================================================================
# Repository Factories (Request-Scoped)
# ============================================================================


async def get_app_connection_repository(
    session: AsyncSession = Depends(get_db_session),
) -> "AppConnectionRepository":
    """Get app connection repository (request-scoped).

    Args:
        session: Database session for request duration.
            Injected via Depends(get_db_session).

    Returns:
        AppConnectionRepository instance.
    """
    from src.infrastructure.persistence.repositories import AppConnectionRepository

    return AppConnectionRepository(session=session)
