"""
Post readers
"""
from typing import List, Optional

from cms_admin.core.results import ReadResult
from cms_admin.models.post import Post
from cms_admin.schemas.rows import PostRow, PostTranslationRow
from cms_admin.services.base_reader import (BaseReader, is_numeric_id,
                                            parse_numeric_id)


class PostReader(BaseReader):
    """Reads rows of the posts table"""

    def get_posts(self) -> List[PostRow]:
        """All posts ordered by title"""
        return self._read_list(
            "posts",
            lambda db: db.query(Post).order_by(Post.title.asc()).all(),
            PostRow,
        )

    def get_post(self, identifier: str) -> ReadResult[PostRow]:
        """
        Single post by numeric id or by slug.

        Older links carry the numeric id, newer ones the slug.
        """
        def query(db):
            if is_numeric_id(identifier):
                criterion = Post.id == parse_numeric_id(identifier)
            else:
                criterion = Post.slug == identifier
            return db.query(Post).filter(criterion).one_or_none()

        return self._read_one("post", identifier, query, PostRow)

    def get_post_translations(self, translation_group_id: Optional[str]) -> List[PostTranslationRow]:
        """Sibling translations of a post, original first"""
        if not translation_group_id:
            return []

        return self._read_list(
            "post translations",
            lambda db: (
                db.query(Post)
                .filter(Post.translation_group_id == translation_group_id)
                .order_by(Post.is_original.desc())
                .all()
            ),
            PostTranslationRow,
        )
