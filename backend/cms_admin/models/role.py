"""
Role model
"""
from datetime import datetime, timezone
from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import relationship

from cms_admin.core.database import Base


class RoleValue(str, Enum):
    """Closed set of role values"""
    ADMIN = "admin"
    AUTHOR = "author"
    READER = "reader"
    BANNED = "banned"


class Role(Base):
    """Role referenced by profiles"""
    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    value = Column(String(50), nullable=True)
    label = Column(String(255), nullable=True)
    order = Column(Integer, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)

    profiles = relationship("Profile", back_populates="role")

    def __repr__(self):
        return f"<Role(id={self.id}, value={self.value})>"
