"""Journal API endpoints."""

from fastapi import APIRouter, Depends, Query

from journal_api.schemas.base import MessageResponse
from journal_api.schemas.journal import (
    Comment,
    CommentCreate,
    JournalCreate,
    JournalResponse,
    JournalUpdate,
)
from journal_api.services.base import NotFoundError
from journal_api.services.journals import JournalService, get_journal_service

router = APIRouter(prefix="/journal", tags=["journal"])

# Fixed paths are declared before "/{username}" and "/{journal_id}" so they win.


@router.get("/all", response_model=list[JournalResponse])
async def list_journals(
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(5, ge=1, le=100, description="Items per page"),
    service: JournalService = Depends(get_journal_service),
) -> list[JournalResponse]:
    """List all journals, newest first. Soft-deleted journals are left out."""
    journals = await service.list_all(page, size)
    return [JournalResponse.model_validate(journal) for journal in journals]


@router.get("/friends/{username}", response_model=list[JournalResponse])
async def list_friends_journals(
    username: str,
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(5, ge=1, le=100, description="Items per page"),
    service: JournalService = Depends(get_journal_service),
) -> list[JournalResponse]:
    """List journals written by the user's friends, most recently updated first.

    Raises:
        HTTPException 404: If the user has no relationship record
    """
    journals = await service.friends_feed(username, page, size)
    return [JournalResponse.model_validate(journal) for journal in journals]


@router.get("/search", response_model=list[JournalResponse])
async def search_journals(
    keywords: str = Query(..., description="Text to look for in title or content"),
    page: int = Query(0, ge=0, description="Accepted for compatibility, not applied"),
    size: int = Query(5, ge=1, le=100, description="Accepted for compatibility, not applied"),
    service: JournalService = Depends(get_journal_service),
) -> list[JournalResponse]:
    """Search journals by keyword.

    Returns every match; ``page`` and ``size`` are accepted but ignored.
    """
    journals = await service.search(keywords)
    return [JournalResponse.model_validate(journal) for journal in journals]


@router.get("/{username}", response_model=list[JournalResponse])
async def list_user_journals(
    username: str,
    page: int = Query(0, ge=0, description="Zero-based page number"),
    size: int = Query(5, ge=1, le=100, description="Items per page"),
    service: JournalService = Depends(get_journal_service),
) -> list[JournalResponse]:
    """List one author's journals, newest first."""
    journals = await service.list_by_author(username, page, size)
    return [JournalResponse.model_validate(journal) for journal in journals]


@router.post("/new", response_model=JournalResponse, status_code=201)
async def create_journal(
    journal_data: JournalCreate,
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    """Create a new journal.

    Raises:
        HTTPException 400: If title or content is blank
    """
    journal = await service.create(journal_data)
    return JournalResponse.model_validate(journal)


@router.put("/like", response_model=JournalResponse, status_code=202)
async def like_journal(
    id: str = Query(..., description="Journal ID"),
    username: str = Query(..., description="User liking the journal"),
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    """Like a journal. Liking twice records two likes."""
    journal = await service.like(id, username)
    return JournalResponse.model_validate(journal)


@router.put("/unlike", response_model=JournalResponse, status_code=202)
async def unlike_journal(
    id: str = Query(..., description="Journal ID"),
    username: str = Query(..., description="User withdrawing a like"),
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    """Remove one like by the user from a journal."""
    journal = await service.unlike(id, username)
    return JournalResponse.model_validate(journal)


@router.put("/comment/{journal_id}", response_model=Comment, status_code=202)
async def comment_on_journal(
    journal_id: str,
    comment_data: CommentCreate,
    service: JournalService = Depends(get_journal_service),
) -> Comment:
    """Add a comment to a journal and return the new comment."""
    return await service.add_comment(journal_id, comment_data)


@router.put("/{journal_id}", response_model=JournalResponse, status_code=202)
async def update_journal(
    journal_id: str,
    journal_data: JournalUpdate,
    service: JournalService = Depends(get_journal_service),
) -> JournalResponse:
    """Update a journal's title and/or content."""
    journal = await service.update(journal_id, journal_data)
    return JournalResponse.model_validate(journal)


@router.delete("/{journal_id}", response_model=MessageResponse, status_code=202)
async def delete_journal(
    journal_id: str,
    service: JournalService = Depends(get_journal_service),
) -> MessageResponse:
    """Soft-delete a journal."""
    if not await service.soft_delete(journal_id):
        raise NotFoundError("Journal not found")
    return MessageResponse(message="Journal deleted successfully")
