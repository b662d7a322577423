"""Journal content service."""

import logging

from fastapi import Depends
from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from journal_api.database import get_db
from journal_api.models.journal import Journal, new_object_id
from journal_api.schemas.journal import Comment, CommentCreate, JournalCreate, JournalUpdate
from journal_api.services.base import NotFoundError, ValidationError
from journal_api.services.relationships import RelationshipService
from journal_api.utils.dates import utcnow

logger = logging.getLogger(__name__)


class JournalService:
    """Creates, edits, lists and annotates journals.

    Likes and comments are stored on the journal itself; every change is a
    read-modify-write of the whole journal with no version check, so two
    concurrent edits of the same journal can lose one of them.
    """

    def __init__(self, db: AsyncSession, relationships: RelationshipService | None = None) -> None:
        self.db = db
        self.relationships = relationships or RelationshipService(db)

    async def _page(self, query, page: int, size: int) -> list[Journal]:
        result = await self.db.execute(query.offset(page * size).limit(size))
        return list(result.scalars().all())

    async def list_all(self, page: int, size: int) -> list[Journal]:
        """Newest journals first, soft-deleted ones excluded."""
        query = (
            select(Journal)
            .where(Journal.is_deleted.is_(False))
            .order_by(Journal.created_datetime.desc())
        )
        return await self._page(query, page, size)

    async def list_by_author(self, username: str, page: int, size: int) -> list[Journal]:
        """Journals by one author, newest first. Soft-deleted ones are included."""
        query = (
            select(Journal)
            .where(Journal.username == username)
            .order_by(Journal.created_datetime.desc())
        )
        return await self._page(query, page, size)

    async def list_by_authors(self, usernames: list[str], page: int, size: int) -> list[Journal]:
        """Journals by any of ``usernames``, most recently updated first."""
        if not usernames:
            return []
        query = (
            select(Journal)
            .where(Journal.username.in_(usernames))
            .order_by(Journal.updated_datetime.desc())
        )
        return await self._page(query, page, size)

    async def friends_feed(self, username: str, page: int, size: int) -> list[Journal]:
        """Journals written by ``username``'s friends.

        The friend list and the journals are read separately; a friend list
        edited in between is not reflected consistently.

        Raises:
            RelationshipNotFoundError: If ``username`` has no relationship record.
        """
        friends = await self.relationships.friend_usernames(username)
        return await self.list_by_authors(friends, page, size)

    async def search(self, keywords: str) -> list[Journal]:
        """All journals whose title or content contains ``keywords``.

        Matching is case-sensitive. LIKE narrows the rows in SQL (it is
        case-insensitive on some backends) and the exact check runs here.
        """
        result = await self.db.execute(
            select(Journal)
            .where(
                or_(
                    Journal.title.contains(keywords, autoescape=True),
                    Journal.content.contains(keywords, autoescape=True),
                )
            )
            .order_by(Journal.created_datetime.desc())
        )
        return [
            journal
            for journal in result.scalars().all()
            if keywords in journal.title or keywords in journal.content
        ]

    async def get(self, journal_id: str) -> Journal:
        """Fetch a journal by ID.

        Raises:
            NotFoundError: If the journal does not exist.
        """
        journal = await self.db.get(Journal, journal_id)
        if journal is None:
            raise NotFoundError("Journal not found")
        return journal

    async def create(self, draft: JournalCreate) -> Journal:
        """Create a journal with no likes or comments.

        Raises:
            ValidationError: If title or content is blank.
        """
        for field in ("title", "content"):
            if not getattr(draft, field).strip():
                raise ValidationError(f"Journal {field} must not be blank")

        now = utcnow()
        journal = Journal(
            id=new_object_id(),
            title=draft.title,
            content=draft.content,
            username=draft.username,
            user_avatar=draft.user_avatar,
            likes=[],
            comments=[],
            created_datetime=now,
            updated_datetime=now,
            is_deleted=False,
        )
        self.db.add(journal)
        await self.db.flush()
        return journal

    async def update(self, journal_id: str, patch: JournalUpdate) -> Journal:
        """Apply the non-null fields of ``patch``. Soft-deleted journals are editable."""
        journal = await self.get(journal_id)

        if patch.title is not None:
            journal.title = patch.title
        if patch.content is not None:
            journal.content = patch.content
        journal.updated_datetime = utcnow()

        await self.db.flush()
        return journal

    async def soft_delete(self, journal_id: str) -> bool:
        """Flag a journal as deleted. Returns False if it does not exist."""
        journal = await self.db.get(Journal, journal_id)
        if journal is None:
            return False

        journal.is_deleted = True
        journal.updated_datetime = utcnow()
        await self.db.flush()
        logger.info("Soft-deleted journal %s", journal_id)
        return True

    async def like(self, journal_id: str, username: str) -> Journal:
        """Append ``username`` to the likes. Repeated likes accumulate."""
        journal = await self.get(journal_id)
        journal.likes = [*journal.likes, username]
        journal.updated_datetime = utcnow()
        await self.db.flush()
        return journal

    async def unlike(self, journal_id: str, username: str) -> Journal:
        """Remove the first occurrence of ``username`` from the likes, if present."""
        journal = await self.get(journal_id)
        likes = list(journal.likes)
        if username in likes:
            likes.remove(username)
        journal.likes = likes
        journal.updated_datetime = utcnow()
        await self.db.flush()
        return journal

    async def add_comment(self, journal_id: str, draft: CommentCreate) -> Comment:
        """Append a new comment to a journal and return just that comment."""
        journal = await self.get(journal_id)

        now = utcnow()
        comment = Comment(
            id=new_object_id(),
            simple_user=draft.simple_user,
            content=draft.content,
            replies=[],
            created_datetime=now,
        )
        journal.comments = [*journal.comments, comment.model_dump(mode="json", by_alias=True)]
        journal.updated_datetime = now
        await self.db.flush()
        return comment


async def get_journal_service(db: AsyncSession = Depends(get_db)) -> JournalService:
    """Factory function to create a journal service.

    Can be used as a FastAPI dependency.
    """
    return JournalService(db)
