"""
Category, type and tag readers
"""
from typing import List

from cms_admin.core.results import ReadResult
from cms_admin.models.taxonomy import Category, Tag, Type
from cms_admin.schemas.rows import CategoryRow, TagRow, TypeRow
from cms_admin.services.base_reader import BaseReader, parse_numeric_id


class TaxonomyReader(BaseReader):
    """Reads the lookup tables used to classify posts"""

    def get_categories(self) -> List[CategoryRow]:
        return self._read_list(
            "categories",
            lambda db: db.query(Category).order_by(Category.name.asc()).all(),
            CategoryRow,
        )

    def get_category(self, category_id: str) -> ReadResult[CategoryRow]:
        return self._read_one(
            "category",
            category_id,
            lambda db: db.query(Category).filter(Category.id == parse_numeric_id(category_id)).one_or_none(),
            CategoryRow,
        )

    def get_types(self) -> List[TypeRow]:
        return self._read_list(
            "types",
            lambda db: db.query(Type).order_by(Type.name.asc()).all(),
            TypeRow,
        )

    def get_type(self, type_id: str) -> ReadResult[TypeRow]:
        return self._read_one(
            "type",
            type_id,
            lambda db: db.query(Type).filter(Type.id == parse_numeric_id(type_id)).one_or_none(),
            TypeRow,
        )

    def get_tags(self) -> List[TagRow]:
        return self._read_list(
            "tags",
            lambda db: db.query(Tag).order_by(Tag.name.asc()).all(),
            TagRow,
        )

    def get_tag(self, tag_id: str) -> ReadResult[TagRow]:
        return self._read_one(
            "tag",
            tag_id,
            lambda db: db.query(Tag).filter(Tag.id == parse_numeric_id(tag_id)).one_or_none(),
            TagRow,
        )
