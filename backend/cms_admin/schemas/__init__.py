"""
Read-only row shapes handed to pages
"""
from cms_admin.schemas.rows import (BookProgramRow, BookRow, CategoryRow,
                                    PostRow, PostTranslationRow, ProfileRow,
                                    ProgramRow, RoleRow, TagRow, TaskOwnerRow,
                                    TaskRow, TypeRow)

__all__ = [
    "BookProgramRow",
    "BookRow",
    "CategoryRow",
    "PostRow",
    "PostTranslationRow",
    "ProfileRow",
    "ProgramRow",
    "RoleRow",
    "TagRow",
    "TaskOwnerRow",
    "TaskRow",
    "TypeRow",
]
