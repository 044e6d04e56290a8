"""
Travel post written by a host or admin.
"""

import enum

from sqlalchemy import CheckConstraint, Column, Integer, String, Text

from tripbook.db.base import Base, TimestampMixin


class PostStatus(str, enum.Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class Post(Base, TimestampMixin):
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    category = Column(String(100), nullable=False)
    status = Column(String(20), nullable=False, default=PostStatus.PUBLISHED.value)

    __table_args__ = (
        CheckConstraint("status IN ('draft', 'published', 'archived')", name="check_post_status"),
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, user={self.user_id}, title={self.title})>"
