"""
Shared FastAPI dependencies for page routes
"""
import asyncio
from typing import Any, Callable, List

from fastapi import Depends, Request
from starlette.concurrency import run_in_threadpool

from cms_admin.core.auth import AuthProvider, get_auth_provider
from cms_admin.core.database import SessionFactory, get_session_factory
from cms_admin.core.state import PageState, get_page_state
from cms_admin.core.templates import render_template
from cms_admin.services.book_reader import BookReader
from cms_admin.services.post_reader import PostReader
from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.session_resolver import SessionResolver
from cms_admin.services.task_reader import TaskReader
from cms_admin.services.taxonomy_reader import TaxonomyReader


def get_post_reader(session_factory: SessionFactory = Depends(get_session_factory)) -> PostReader:
    return PostReader(session_factory)


def get_book_reader(session_factory: SessionFactory = Depends(get_session_factory)) -> BookReader:
    return BookReader(session_factory)


def get_profile_reader(session_factory: SessionFactory = Depends(get_session_factory)) -> ProfileReader:
    return ProfileReader(session_factory)


def get_task_reader(session_factory: SessionFactory = Depends(get_session_factory)) -> TaskReader:
    return TaskReader(session_factory)


def get_taxonomy_reader(session_factory: SessionFactory = Depends(get_session_factory)) -> TaxonomyReader:
    return TaxonomyReader(session_factory)


async def get_account_state(
    request: Request,
    page_state: PageState = Depends(get_page_state),
    auth_provider: AuthProvider = Depends(get_auth_provider),
    profile_reader: ProfileReader = Depends(get_profile_reader),
) -> PageState:
    """
    Page state with the signed-in profile pushed into the user store.

    The store is written once per page, only when a profile was found.
    """
    resolver = SessionResolver(auth_provider, profile_reader)
    profile = await run_in_threadpool(resolver.get_my_profile, request)
    if profile is not None:
        page_state.user.replace(profile)
    return page_state


async def run_concurrently(*reads: Callable[[], Any]) -> List[Any]:
    """Run independent blocking reads in the thread pool and wait for all of them"""
    return list(await asyncio.gather(*(run_in_threadpool(read) for read in reads)))


def render_page(request: Request, page_state: PageState, template_name: str, context: dict, status_code: int = 200):
    """Render a page template with the layout's account slot filled from the user store"""
    return render_template(
        template_name,
        {"account": page_state.user.value, **context},
        request,
        status_code=status_code,
    )


def render_not_found(request: Request, page_state: PageState, message: str):
    """The fixed message shown when the primary read of a detail page failed"""
    return render_page(request, page_state, "not_found.html", {"message": message}, status_code=404)
