"""
Authentication provider and session cookie handling.

Pages and readers only ever see ``resolve_session``; everything about the
cookie, the session rows and the role gate lives behind ``AuthProvider``.
"""
import secrets
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

import bcrypt
from fastapi import Request, Response
from fastapi.responses import RedirectResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from cms_admin.core.config import Settings, get_settings
from cms_admin.core.database import SessionFactory, get_session_local
from cms_admin.core.logging_config import LoggingConfig
from cms_admin.core.permissions import is_staff
from cms_admin.core.templates import templates
from cms_admin.models.profile import Profile
from cms_admin.models.user import AuthSession, AuthUser

logger = LoggingConfig.get_logger(__name__)

# Reachable without a session
PUBLIC_PATH_PREFIXES = ("/login", "/api/auth", "/reset-password")
SIGNOUT_PATH = "/api/auth/signout"
LOGIN_PATH = "/login"


def _aware(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class SessionRefresh:
    """Outcome of refreshing the session for one request"""
    user_id: Optional[str] = None
    # Set when the request must not reach the router
    response: Optional[Response] = None
    # Token to (re)issue on the outgoing response
    set_token: Optional[str] = None
    clear_cookie: bool = False


class AuthProvider(ABC):
    """Capability the application uses to talk to the auth backend"""

    @property
    @abstractmethod
    def cookie_name(self) -> str:
        """Name of the session cookie"""

    @abstractmethod
    def resolve_session(self, request: Request) -> Optional[str]:
        """Return the authenticated user id for this request, if any"""

    @abstractmethod
    def refresh_session(self, request: Request) -> SessionRefresh:
        """Validate and extend the session; may short-circuit the request"""

    @abstractmethod
    def sign_in(self, email: str, password: str) -> Optional[str]:
        """Return a new session token, or None on bad credentials"""

    @abstractmethod
    def sign_out(self, token: str) -> bool:
        """Invalidate a session token"""

    @abstractmethod
    def apply_cookies(self, refresh: SessionRefresh, response: Response) -> None:
        """Write the cookie changes of a refresh onto a response"""

    @abstractmethod
    def set_session_cookie(self, response: Response, token: str) -> None:
        """Issue the session cookie on a response"""


class DatabaseAuthProvider(AuthProvider):
    """
    Session-cookie auth backed by the ``auth_users`` and ``auth_sessions`` tables.

    Sessions slide: each refresh pushes ``expires_at`` forward and re-issues
    the cookie. Users whose profile role is not admin/author are sent to the
    sign-out endpoint.
    """

    def __init__(self, session_factory: Optional[SessionFactory] = None, settings: Optional[Settings] = None):
        self._session_factory = session_factory
        self.settings = settings or get_settings()

    @property
    def cookie_name(self) -> str:
        return self.settings.session_cookie_name

    def _open(self) -> Session:
        factory = self._session_factory or get_session_local()
        return factory()

    def _get_token(self, request: Request) -> Optional[str]:
        return request.cookies.get(self.cookie_name)

    def _find_valid_session(self, db: Session, token: str) -> Optional[AuthSession]:
        session = db.query(AuthSession).filter(AuthSession.token == token).first()
        if not session:
            return None
        if _aware(session.expires_at) < _utcnow():
            logger.info(f"Session {session.id} expired")
            return None
        return session

    # ------------------------------------------------------------------
    # AuthProvider
    # ------------------------------------------------------------------

    def resolve_session(self, request: Request) -> Optional[str]:
        token = self._get_token(request)
        if not token:
            return None

        db = self._open()
        try:
            session = self._find_valid_session(db, token)
            return session.user_id if session else None
        finally:
            db.close()

    def refresh_session(self, request: Request) -> SessionRefresh:
        path = request.url.path
        refresh = SessionRefresh()
        role = None

        token = self._get_token(request)
        if token:
            try:
                role = self._extend_session(token, refresh)
            except SQLAlchemyError as e:
                logger.error(f"Failed to refresh session: {e}", exc_info=True)
                refresh.user_id = None

        if refresh.user_id is None:
            if not path.startswith(PUBLIC_PATH_PREFIXES):
                logger.info("No authenticated user, redirecting to login", extra={"path": path})
                refresh.response = RedirectResponse(url=LOGIN_PATH)
            return refresh

        if not is_staff(role) and not path.startswith(SIGNOUT_PATH):
            logger.info(
                "Role not allowed, signing out",
                extra={"user_id": refresh.user_id, "role": role},
            )
            refresh.response = templates.TemplateResponse(
                request,
                "auth/signout.html",
                {"signout_url": SIGNOUT_PATH},
            )

        return refresh

    def _extend_session(self, token: str, refresh: SessionRefresh) -> Optional[str]:
        """Slide a valid session forward; returns the user's role value"""
        db = self._open()
        try:
            session = self._find_valid_session(db, token)
            if not session:
                refresh.clear_cookie = True
                return None

            now = _utcnow()
            session.last_activity = now
            session.expires_at = now + timedelta(hours=self.settings.session_duration_hours)
            db.commit()

            refresh.user_id = session.user_id
            refresh.set_token = token

            profile = (
                db.query(Profile)
                .options(joinedload(Profile.role))
                .filter(Profile.id == session.user_id)
                .first()
            )
            return profile.role.value if profile and profile.role else None
        finally:
            db.close()

    def sign_in(self, email: str, password: str) -> Optional[str]:
        db = self._open()
        try:
            user = db.query(AuthUser).filter(AuthUser.email == email).first()
            if not user:
                logger.warning(f"Sign-in failed: user '{email}' not found")
                return None

            if not self._verify_password(password, user.password_hash):
                logger.warning(f"Sign-in failed: invalid password for user '{email}'")
                return None

            now = _utcnow()
            session = AuthSession(
                user_id=user.id,
                token=secrets.token_urlsafe(32),
                expires_at=now + timedelta(hours=self.settings.session_duration_hours),
            )
            user.last_sign_in_at = now
            db.add(session)
            db.commit()

            logger.info(f"User '{email}' signed in")
            return session.token
        finally:
            db.close()

    def sign_out(self, token: str) -> bool:
        db = self._open()
        try:
            session = db.query(AuthSession).filter(AuthSession.token == token).first()
            if not session:
                return False
            db.delete(session)
            db.commit()
            logger.info(f"Session {session.id} invalidated")
            return True
        finally:
            db.close()

    def apply_cookies(self, refresh: SessionRefresh, response: Response) -> None:
        if refresh.set_token:
            self.set_session_cookie(response, refresh.set_token)
        elif refresh.clear_cookie:
            response.delete_cookie(key=self.cookie_name)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def set_session_cookie(self, response: Response, token: str) -> None:
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            httponly=True,
            secure=self.settings.session_cookie_secure,
            samesite="lax",
            max_age=self.settings.session_duration_hours * 60 * 60,
        )

    def create_user(self, email: str, password: str) -> AuthUser:
        """
        Create an auth identity.

        Raises:
            ValueError: If the email is already registered
        """
        db = self._open()
        try:
            if db.query(AuthUser).filter(AuthUser.email == email).first():
                raise ValueError(f"Email '{email}' already exists")

            user = AuthUser(email=email, password_hash=self._hash_password(password))
            db.add(user)
            db.commit()
            db.refresh(user)
            logger.info(f"Registered auth user {email}")
            return user
        finally:
            db.close()

    def _hash_password(self, password: str) -> str:
        """Hash a password using bcrypt"""
        return bcrypt.hashpw(password.encode('utf-8'), bcrypt.gensalt()).decode('utf-8')

    def _verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a password against a hash"""
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))


def get_auth_provider(request: Request) -> AuthProvider:
    """Dependency returning the provider installed on the application"""
    return request.app.state.auth_provider
