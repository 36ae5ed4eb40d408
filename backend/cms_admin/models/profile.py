"""
Profile model
"""
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from cms_admin.core.database import Base


class Profile(Base):
    """Public profile row; shares its id with the auth user"""
    __tablename__ = "profiles"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    username = Column(String(255), nullable=True, index=True)
    email = Column(String(255), nullable=True, index=True)
    full_name = Column(String(255), nullable=True)
    avatar_url = Column(String(1024), nullable=True)
    website = Column(String(1024), nullable=True)
    phone = Column(String(64), nullable=True)
    role_id = Column(Integer, ForeignKey("roles.id"), nullable=True, index=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)
    updated_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)

    role = relationship("Role", back_populates="profiles")
    tasks = relationship("Task", back_populates="owner")

    def __repr__(self):
        return f"<Profile(id={self.id}, username={self.username})>"
