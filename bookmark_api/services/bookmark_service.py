import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bookmark_api.auth.dependencies import Identity
from bookmark_api.core.errors import DatabaseUnavailableError, NotFoundError
from bookmark_api.models.bookmark import Bookmark
from bookmark_api.schemas.bookmark import CreateBookmarkDto, EditBookmarkDto

logger = logging.getLogger(__name__)


class BookmarkService:
    """CRUD over bookmarks, always scoped to the calling identity.

    A bookmark owned by somebody else is indistinguishable from one that
    does not exist: both raise NotFoundError.
    """

    def __init__(self, db: Session):
        self.db = db

    def list(self, identity: Identity) -> list[Bookmark]:
        return (
            self.db.query(Bookmark)
            .filter(Bookmark.user_id == identity.user_id)
            .order_by(Bookmark.id.asc())
            .all()
        )

    def create(self, identity: Identity, dto: CreateBookmarkDto) -> Bookmark:
        bookmark = Bookmark(
            user_id=identity.user_id,
            title=dto.title,
            link=dto.link,
            description=dto.description,
        )
        self.db.add(bookmark)
        self._commit(bookmark)
        logger.info("User %s created bookmark %s", identity.user_id, bookmark.id)
        return bookmark

    def get_by_id(self, identity: Identity, bookmark_id: int) -> Bookmark:
        bookmark = (
            self.db.query(Bookmark)
            .filter(Bookmark.id == bookmark_id, Bookmark.user_id == identity.user_id)
            .first()
        )
        if bookmark is None:
            raise NotFoundError("Bookmark not found")
        return bookmark

    def edit(self, identity: Identity, bookmark_id: int, dto: EditBookmarkDto) -> Bookmark:
        bookmark = self.get_by_id(identity, bookmark_id)
        for field, value in dto.model_dump(exclude_unset=True).items():
            setattr(bookmark, field, value)
        self._commit(bookmark)
        logger.debug("User %s edited bookmark %s", identity.user_id, bookmark_id)
        return bookmark

    def delete(self, identity: Identity, bookmark_id: int) -> None:
        bookmark = self.get_by_id(identity, bookmark_id)
        self.db.delete(bookmark)
        self._commit()
        logger.info("User %s deleted bookmark %s", identity.user_id, bookmark_id)

    def _commit(self, refresh: Bookmark | None = None) -> None:
        try:
            self.db.commit()
            if refresh is not None:
                self.db.refresh(refresh)
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.exception("Bookmark write failed")
            raise DatabaseUnavailableError() from exc
