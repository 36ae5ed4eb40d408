"""
Book, Program and the books_programs join table
"""
from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from cms_admin.core.database import Base


class Program(Base):
    """Program a book can be attached to"""
    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title_en = Column(String(512), nullable=True)


class Book(Base):
    """Book model"""
    __tablename__ = "books"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(512), nullable=False)
    description = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=lambda: datetime.now(timezone.utc), nullable=True)

    books_programs = relationship("BookProgram", back_populates="book", order_by="BookProgram.id")

    def __repr__(self):
        return f"<Book(id={self.id}, title={self.title})>"


class BookProgram(Base):
    """Join row between books and programs"""
    __tablename__ = "books_programs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False, index=True)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True)

    book = relationship("Book", back_populates="books_programs")
    program = relationship("Program")
