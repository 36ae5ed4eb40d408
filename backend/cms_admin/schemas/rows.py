"""
Pydantic shapes mirroring database rows.

Readers convert ORM objects into these while their session is still open,
so pages never touch a detached instance.
"""
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class _Row(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)


class RoleRow(_Row):
    id: int
    value: Optional[str] = None
    label: Optional[str] = None
    order: Optional[int] = None
    created_at: Optional[datetime] = None


class ProfileRow(_Row):
    id: str
    username: Optional[str] = None
    email: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    website: Optional[str] = None
    phone: Optional[str] = None
    role_id: Optional[int] = None
    role: Optional[RoleRow] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PostRow(_Row):
    id: int
    title: str
    slug: str
    content: str = ""
    type: str = "post"
    status: str = "Draft"
    source: Optional[str] = None
    image_url: Optional[str] = None
    category_id: Optional[int] = None
    author_id: Optional[str] = None
    language: Optional[str] = None
    is_original: bool = True
    translation_group_id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_published(self) -> bool:
        return self.status.lower() == "published"


class PostTranslationRow(_Row):
    id: int
    title: str
    slug: str
    language: Optional[str] = None
    is_original: bool
    status: str


class ProgramRow(_Row):
    id: int
    title_en: Optional[str] = None


class BookProgramRow(_Row):
    id: int
    book_id: int
    program_id: int
    program: Optional[ProgramRow] = None


class BookRow(_Row):
    id: int
    title: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    books_programs: List[BookProgramRow] = []


class CategoryRow(_Row):
    id: int
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TypeRow(_Row):
    id: int
    name: str
    description: Optional[str] = None
    classification: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class TagRow(_Row):
    id: int
    name: str
    created_at: Optional[datetime] = None


class TaskOwnerRow(_Row):
    id: str
    full_name: Optional[str] = None


class TaskRow(_Row):
    id: str
    title: str
    description: Optional[str] = None
    due_date: Optional[datetime] = None
    owner_id: Optional[str] = None
    owner: Optional[TaskOwnerRow] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
