"""
Book reader
"""
from sqlalchemy.orm import joinedload, selectinload

from cms_admin.core.results import ReadResult
from cms_admin.models.book import Book, BookProgram
from cms_admin.schemas.rows import BookRow
from cms_admin.services.base_reader import BaseReader, parse_numeric_id


class BookReader(BaseReader):
    """Reads books together with their program associations"""

    def get_book(self, book_id: str) -> ReadResult[BookRow]:
        def query(db):
            return (
                db.query(Book)
                .options(selectinload(Book.books_programs).joinedload(BookProgram.program))
                .filter(Book.id == parse_numeric_id(book_id))
                .one_or_none()
            )

        return self._read_one("book", book_id, query, BookRow)
