"""
Post model
"""
from datetime import datetime, timezone

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from cms_admin.core.database import Base


class Post(Base):
    """Post model"""
    __tablename__ = "posts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False)
    slug = Column(String(512), nullable=False, index=True)
    content = Column(Text, nullable=False, default="")
    type = Column(String(64), nullable=False, default="post")
    status = Column(String(32), nullable=False, default="Draft")
    source = Column(String(1024), nullable=True)
    image_url = Column(String(1024), nullable=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=True)
    author_id = Column(String(36), ForeignKey("profiles.id"), nullable=True)
    language = Column(String(8), nullable=True)
    is_original = Column(Boolean, nullable=False, default=True)
    translation_group_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)

    category = relationship("Category")
    author = relationship("Profile")

    def __repr__(self):
        return f"<Post(id={self.id}, slug={self.slug})>"
