"""Bookmark model definitions."""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, func
from bookmark_api.database import Base


class Bookmark(Base):
    """A saved link belonging to exactly one user."""
    __tablename__ = "bookmarks"

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    description = Column(String, nullable=True)
    link = Column(String, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    created_at = Column(DateTime, nullable=False, server_default=func.now())
    updated_at = Column(DateTime, nullable=False, server_default=func.now(), onupdate=func.now())
