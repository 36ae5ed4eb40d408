"""
Shared plumbing for entity readers
"""
import re
from typing import Any, Callable, List, Optional, Type, TypeVar

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from cms_admin.core.database import SessionFactory
from cms_admin.core.logging_config import LoggingConfig
from cms_admin.core.results import (NEW_IDENTIFIER, Failed, Found, NotFound,
                                    ReadResult)

logger = LoggingConfig.get_logger(__name__)

RowT = TypeVar("RowT", bound=BaseModel)

# Errors that mean "the query failed" rather than "no row"
READ_ERRORS = (SQLAlchemyError, ValueError)

NUMERIC_ID_PATTERN = re.compile(r"[0-9]+")

# Largest value a bigint key column holds
MAX_ID = 2 ** 63 - 1


def is_numeric_id(identifier: str) -> bool:
    """ASCII digits only; other Unicode digits are not ids"""
    return NUMERIC_ID_PATTERN.fullmatch(identifier) is not None


def parse_numeric_id(identifier: str) -> int:
    """Numeric primary keys come in as route strings; a bad cast is a query failure"""
    if not is_numeric_id(identifier):
        raise ValueError(f"invalid input syntax for type integer: {identifier!r}")
    value = int(identifier)
    if value > MAX_ID:
        raise ValueError(f"value {identifier!r} is out of range for type bigint")
    return value


class BaseReader:
    """
    Base class for readers.

    Every read opens and closes its own session from the injected factory.
    List reads collapse failures to an empty list; single-row reads return
    a tagged ReadResult.
    """

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def _read_list(
        self,
        label: str,
        query: Callable[[Session], List[Any]],
        row_type: Type[RowT],
    ) -> List[RowT]:
        try:
            db = self.session_factory()
            try:
                return [row_type.model_validate(obj) for obj in query(db)]
            finally:
                db.close()
        except READ_ERRORS as e:
            logger.error(
                f"Error fetching {label}: {e}",
                exc_info=True,
                extra={"reader": label, "error_type": type(e).__name__},
            )
            return []

    def _read_one(
        self,
        label: str,
        identifier: Optional[str],
        query: Callable[[Session], Any],
        row_type: Type[RowT],
    ) -> ReadResult[RowT]:
        if identifier == NEW_IDENTIFIER:
            return NotFound()

        try:
            db = self.session_factory()
            try:
                obj = query(db)
                if obj is None:
                    return NotFound()
                return Found(row_type.model_validate(obj))
            finally:
                db.close()
        except READ_ERRORS as e:
            logger.error(
                f"Error fetching {label}: {e}",
                exc_info=True,
                extra={"reader": label, "identifier": identifier, "error_type": type(e).__name__},
            )
            return Failed(reason=str(e))
