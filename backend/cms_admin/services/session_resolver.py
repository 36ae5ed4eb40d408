"""
Maps the authenticated identity of a request to its profile row
"""
from typing import Optional

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError

from cms_admin.core.auth import AuthProvider
from cms_admin.core.logging_config import LoggingConfig
from cms_admin.core.results import Failed, Found
from cms_admin.schemas.rows import ProfileRow
from cms_admin.services.profile_reader import ProfileReader

logger = LoggingConfig.get_logger(__name__)


class SessionResolver:
    """Resolves the profile of the signed-in user, or None"""

    def __init__(self, auth_provider: AuthProvider, profile_reader: ProfileReader):
        self.auth_provider = auth_provider
        self.profile_reader = profile_reader

    def get_my_profile(self, request: Request) -> Optional[ProfileRow]:
        try:
            user_id = self.auth_provider.resolve_session(request)
        except SQLAlchemyError as e:
            logger.warning(f"Failed to resolve session (non-critical): {e}")
            return None

        if not user_id:
            return None

        result = self.profile_reader.get_profile(user_id)
        if isinstance(result, Found):
            return result.row
        if isinstance(result, Failed):
            logger.warning(f"Profile lookup failed for user {user_id}: {result.reason}")
        return None
