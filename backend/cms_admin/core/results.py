"""
Tagged result of a single-row read
"""
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")

# Route identifier meaning "not created yet"
NEW_IDENTIFIER = "new"


@dataclass(frozen=True)
class Found(Generic[T]):
    """The row exists"""
    row: T


@dataclass(frozen=True)
class NotFound:
    """No matching row (or the identifier was "new")"""


@dataclass(frozen=True)
class Failed:
    """The query itself failed"""
    reason: str


ReadResult = Union[Found[T], NotFound, Failed]


def row_or_none(result: "ReadResult[T]"):
    """Unwrap a result into its row, or None for NotFound/Failed"""
    if isinstance(result, Found):
        return result.row
    return None
