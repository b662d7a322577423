"""Relationship API endpoints."""

import logging
from collections.abc import Awaitable

from fastapi import APIRouter, Depends, HTTPException, Query

from journal_api.schemas.base import MessageResponse
from journal_api.schemas.relationship import UserRelationshipResponse
from journal_api.schemas.user import SimpleUser
from journal_api.services.relationships import RelationshipService, get_relationship_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/relationship", tags=["relationship"])

DETAIL_LISTS = ("friends", "following", "followers")


async def apply_edit(edit: Awaitable[object], failure: str, success: str) -> MessageResponse:
    """Run a relationship edit, reporting any failure of it as a 400."""
    try:
        await edit
    except Exception as e:
        logger.warning("%s: %s", failure, e)
        raise HTTPException(status_code=400, detail=f"{failure}: {e}") from e
    return MessageResponse(message=success)


@router.get(
    "/{username}",
    response_model=UserRelationshipResponse | list[SimpleUser],
)
async def get_relationship(
    username: str,
    detail: str | None = Query(None, description="One of friends, following, followers"),
    service: RelationshipService = Depends(get_relationship_service),
) -> UserRelationshipResponse | list[SimpleUser]:
    """Get a user's relationship record, or one of its lists.

    Any other ``detail`` value returns the whole record.

    Raises:
        HTTPException 404: If the user has no relationship record
    """
    record = UserRelationshipResponse.model_validate(await service.get(username))

    if detail in DETAIL_LISTS:
        return getattr(record, detail)
    return record


@router.put("/following", response_model=MessageResponse, status_code=202)
async def follow(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Add the target to the user's following list."""
    return await apply_edit(
        service.follow(username, target_username), "Failed to follow", "Following Success"
    )


@router.delete("/following", response_model=MessageResponse, status_code=202)
async def unfollow(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Remove the target from the user's following list."""
    return await apply_edit(
        service.unfollow(username, target_username), "Failed to unfollow", "Unfollow Success"
    )


@router.put("/follower", response_model=MessageResponse, status_code=202)
async def add_follower(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Add the target to the user's followers list."""
    return await apply_edit(
        service.add_follower(username, target_username), "Failed to follow", "Follow Success"
    )


@router.delete("/follower", response_model=MessageResponse, status_code=202)
async def remove_follower(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Remove the target from the user's followers list."""
    return await apply_edit(
        service.remove_follower(username, target_username),
        "Failed to unfollow",
        "Unfollow Success",
    )


@router.put("/friend", response_model=MessageResponse, status_code=202)
async def add_friend(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Add the target to the user's friends list."""
    return await apply_edit(
        service.add_friend(username, target_username),
        "Failed to add friend",
        "Add Friend Success",
    )


@router.delete("/friend", response_model=MessageResponse, status_code=202)
async def remove_friend(
    username: str = Query(...),
    target_username: str = Query(..., alias="targetUsername"),
    service: RelationshipService = Depends(get_relationship_service),
) -> MessageResponse:
    """Remove the target from the user's friends list."""
    return await apply_edit(
        service.remove_friend(username, target_username),
        "Failed to delete friend",
        "Delete Friend Success",
    )
