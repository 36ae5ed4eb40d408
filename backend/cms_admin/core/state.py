"""
Page-scoped state containers.

A page tree gets one ``PageState``; components read ``.value`` and
overwrite it with ``replace``. Nothing is merged and nothing outlives
the request.
"""
from dataclasses import dataclass, field
from typing import Generic, List, Optional, TypeVar

from fastapi import Request

from cms_admin.schemas.rows import ProfileRow

T = TypeVar("T")


class StateContainer(Generic[T]):
    """Holds one value; ``replace`` swaps it wholesale"""

    def __init__(self, initial: T):
        self._value = initial

    @property
    def value(self) -> T:
        return self._value

    def replace(self, value: T) -> None:
        self._value = value

    def __repr__(self):
        return f"<{type(self).__name__}(value={self._value!r})>"


class UserStore(StateContainer[Optional[ProfileRow]]):
    """Profile of the signed-in user"""

    def __init__(self):
        super().__init__(None)


class ProfilesStore(StateContainer[List[ProfileRow]]):
    """Profile list shown by the profiles page"""

    def __init__(self):
        super().__init__([])


@dataclass
class PageState:
    user: UserStore = field(default_factory=UserStore)
    profiles: ProfilesStore = field(default_factory=ProfilesStore)


def get_page_state(request: Request) -> PageState:
    """Dependency: the state of the page tree being rendered for this request"""
    state = getattr(request.state, "page_state", None)
    if state is None:
        state = PageState()
        request.state.page_state = state
    return state
