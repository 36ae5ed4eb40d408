"""
Database models
"""
from cms_admin.models.book import Book, BookProgram, Program
from cms_admin.models.post import Post
from cms_admin.models.profile import Profile
from cms_admin.models.role import Role, RoleValue
from cms_admin.models.task import Task
from cms_admin.models.taxonomy import Category, Tag, Type
from cms_admin.models.user import AuthSession, AuthUser

__all__ = [
    "AuthSession",
    "AuthUser",
    "Book",
    "BookProgram",
    "Category",
    "Post",
    "Profile",
    "Program",
    "Role",
    "RoleValue",
    "Tag",
    "Task",
    "Type",
]
