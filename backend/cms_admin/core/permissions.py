"""
Role constants and the role to permissions table
"""
from typing import Dict, List

from cms_admin.models.role import RoleValue

ROLE_ADMIN = RoleValue.ADMIN.value
ROLE_AUTHOR = RoleValue.AUTHOR.value
ROLE_READER = RoleValue.READER.value
ROLE_BANNED = RoleValue.BANNED.value

# Roles allowed past the session middleware
STAFF_ROLES = (ROLE_ADMIN, ROLE_AUTHOR)


class Permission:
    """Permission constants"""
    VIEW_DASHBOARD = "view_dashboard"
    MANAGE_USERS = "manage_users"
    EDIT_STOCKS = "edit_stocks"


# Declared for the admin UI; no reader consults it
ROLE_PERMISSIONS: Dict[str, List[str]] = {
    ROLE_ADMIN: [Permission.VIEW_DASHBOARD, Permission.MANAGE_USERS, Permission.EDIT_STOCKS],
    ROLE_AUTHOR: [Permission.VIEW_DASHBOARD, Permission.MANAGE_USERS, Permission.EDIT_STOCKS],
    ROLE_READER: [Permission.VIEW_DASHBOARD, Permission.EDIT_STOCKS],
    ROLE_BANNED: [],
}


def is_staff(role_value) -> bool:
    """True for roles that may use the admin pages"""
    return role_value in STAFF_ROLES
