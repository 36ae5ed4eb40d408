"""
Page routes for profiles
"""
from functools import partial

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from cms_admin.api.deps import (get_account_state, get_profile_reader,
                                render_not_found, render_page,
                                run_concurrently)
from cms_admin.core.results import Failed, row_or_none
from cms_admin.core.state import PageState
from cms_admin.services.profile_reader import ProfileReader

router = APIRouter(tags=["profiles_pages"])


@router.get("/profiles", response_class=HTMLResponse)
async def profiles_list(
    request: Request,
    page_state: PageState = Depends(get_account_state),
    profile_reader: ProfileReader = Depends(get_profile_reader),
):
    profiles = await run_in_threadpool(profile_reader.get_profiles)
    page_state.profiles.replace(profiles)

    return render_page(request, page_state, "profiles/list.html", {"profiles": page_state.profiles.value})


@router.get("/profiles/profile/{profile_id}", response_class=HTMLResponse)
async def profile_detail(
    profile_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    profile_reader: ProfileReader = Depends(get_profile_reader),
):
    result, roles = await run_concurrently(
        partial(profile_reader.get_profile, profile_id),
        profile_reader.get_roles,
    )

    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No profile found.")

    return render_page(
        request,
        page_state,
        "profiles/form.html",
        {"profile": row_or_none(result), "roles": roles},
    )
