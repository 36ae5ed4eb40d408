"""
Profile, author and role readers
"""
from typing import List

from sqlalchemy.orm import contains_eager, joinedload

from cms_admin.core.permissions import STAFF_ROLES
from cms_admin.core.results import ReadResult
from cms_admin.models.profile import Profile
from cms_admin.models.role import Role
from cms_admin.schemas.rows import ProfileRow, RoleRow
from cms_admin.services.base_reader import BaseReader, parse_numeric_id


class ProfileReader(BaseReader):
    """Reads profiles (joined with their role) and roles"""

    def get_profiles(self) -> List[ProfileRow]:
        """All profiles ordered by email"""
        return self._read_list(
            "profiles",
            lambda db: (
                db.query(Profile)
                .options(joinedload(Profile.role))
                .order_by(Profile.email.asc())
                .all()
            ),
            ProfileRow,
        )

    def get_profile(self, profile_id: str) -> ReadResult[ProfileRow]:
        return self._read_one(
            "profile",
            profile_id,
            lambda db: (
                db.query(Profile)
                .options(joinedload(Profile.role))
                .filter(Profile.id == profile_id)
                .one_or_none()
            ),
            ProfileRow,
        )

    def get_authors(self) -> List[ProfileRow]:
        """Profiles whose role is admin or author, ordered by username"""
        return self._read_list(
            "authors",
            lambda db: (
                db.query(Profile)
                .join(Profile.role)
                .options(contains_eager(Profile.role))
                .filter(Role.value.in_(STAFF_ROLES))
                .order_by(Profile.username.asc())
                .all()
            ),
            ProfileRow,
        )

    def get_roles(self) -> List[RoleRow]:
        return self._read_list(
            "roles",
            lambda db: db.query(Role).all(),
            RoleRow,
        )

    def get_role(self, role_id: str) -> ReadResult[RoleRow]:
        return self._read_one(
            "role",
            role_id,
            lambda db: db.query(Role).filter(Role.id == parse_numeric_id(role_id)).one_or_none(),
            RoleRow,
        )
