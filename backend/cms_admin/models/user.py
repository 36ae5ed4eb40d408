"""
Auth user and session models
"""
from datetime import datetime, timezone
from uuid import uuid4

from sqlalchemy import Column, DateTime, ForeignKey, String
from sqlalchemy.orm import relationship

from cms_admin.core.database import Base


def _utcnow():
    return datetime.now(timezone.utc)


class AuthUser(Base):
    """Authentication identity; the matching profile row shares its id"""
    __tablename__ = "auth_users"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    last_sign_in_at = Column(DateTime(timezone=True), nullable=True)

    sessions = relationship("AuthSession", back_populates="user", cascade="all, delete-orphan")

    def __repr__(self):
        return f"<AuthUser(id={self.id}, email={self.email})>"


class AuthSession(Base):
    """Cookie-backed session"""
    __tablename__ = "auth_sessions"

    id = Column(String(36), primary_key=True, default=lambda: str(uuid4()))
    user_id = Column(String(36), ForeignKey("auth_users.id"), nullable=False, index=True)
    token = Column(String(255), unique=True, nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), default=_utcnow, nullable=False)
    last_activity = Column(DateTime(timezone=True), default=_utcnow, nullable=False)

    user = relationship("AuthUser", back_populates="sessions")

    def __repr__(self):
        return f"<AuthSession(id={self.id}, user_id={self.user_id}, expires_at={self.expires_at})>"
