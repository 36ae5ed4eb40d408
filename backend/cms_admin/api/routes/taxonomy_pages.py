"""
Page routes for roles, categories, types and tags
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from cms_admin.api.deps import (get_account_state, get_profile_reader,
                                get_taxonomy_reader, render_not_found,
                                render_page)
from cms_admin.core.results import Failed, row_or_none
from cms_admin.core.state import PageState
from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.taxonomy_reader import TaxonomyReader

router = APIRouter(tags=["taxonomy_pages"])


@router.get("/roles/role/{role_id}", response_class=HTMLResponse)
async def role_detail(
    role_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    profile_reader: ProfileReader = Depends(get_profile_reader),
):
    result = await run_in_threadpool(profile_reader.get_role, role_id)
    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No role found.")
    return render_page(request, page_state, "roles/form.html", {"role": row_or_none(result)})


@router.get("/categories/category/{category_id}", response_class=HTMLResponse)
async def category_detail(
    category_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    taxonomy_reader: TaxonomyReader = Depends(get_taxonomy_reader),
):
    result = await run_in_threadpool(taxonomy_reader.get_category, category_id)
    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No category found.")
    return render_page(request, page_state, "categories/form.html", {"category": row_or_none(result)})


@router.get("/types/{type_id}", response_class=HTMLResponse)
async def type_detail(
    type_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    taxonomy_reader: TaxonomyReader = Depends(get_taxonomy_reader),
):
    result = await run_in_threadpool(taxonomy_reader.get_type, type_id)
    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No type found.")
    return render_page(request, page_state, "types/form.html", {"type": row_or_none(result)})


@router.get("/tags/{tag_id}", response_class=HTMLResponse)
async def tag_detail(
    tag_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    taxonomy_reader: TaxonomyReader = Depends(get_taxonomy_reader),
):
    result = await run_in_threadpool(taxonomy_reader.get_tag, tag_id)
    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No tag found.")
    return render_page(request, page_state, "tags/form.html", {"tag": row_or_none(result)})
