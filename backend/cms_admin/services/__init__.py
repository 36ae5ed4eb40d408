"""
Entity readers and the session resolver
"""
from cms_admin.services.book_reader import BookReader
from cms_admin.services.post_reader import PostReader
from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.session_resolver import SessionResolver
from cms_admin.services.task_reader import TaskReader
from cms_admin.services.taxonomy_reader import TaxonomyReader

__all__ = [
    "BookReader",
    "PostReader",
    "ProfileReader",
    "SessionResolver",
    "TaskReader",
    "TaxonomyReader",
]
