"""Acting identity dependencies.

Authentication happens upstream: the authentication layer resolves the
caller and stores an OrgServiceActor on request.state.actor. Routes depend
on get_current_actor to read it.

Usage:
    @router.get("/app-connections")
    async def list_app_connections(
        actor: CurrentActor,
    ):
        ...
"""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status

from src.domain.value_objects import OrgServiceActor


async def get_current_actor(request: Request) -> OrgServiceActor:
    """Get the acting identity of the request.

    Args:
        request: Incoming request.

    Returns:
        OrgServiceActor set by the authentication layer.

    Raises:
        HTTPException: 401 if no actor is attached to the request.
    """
    actor = getattr(request.state, "actor", None)
    if not isinstance(actor, OrgServiceActor):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return actor


CurrentActor = Annotated[OrgServiceActor, Depends(get_current_actor)]
