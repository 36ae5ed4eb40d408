"""
Page routes for posts
"""
from functools import partial

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from cms_admin.api.deps import (get_account_state, get_post_reader,
                                get_profile_reader, get_taxonomy_reader,
                                render_not_found, render_page,
                                run_concurrently)
from cms_admin.core.results import Failed, row_or_none
from cms_admin.core.state import PageState
from cms_admin.services.post_reader import PostReader
from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.taxonomy_reader import TaxonomyReader

router = APIRouter(tags=["posts_pages"])


@router.get("/posts", response_class=HTMLResponse)
async def posts_list(
    request: Request,
    page_state: PageState = Depends(get_account_state),
    post_reader: PostReader = Depends(get_post_reader),
):
    posts = await run_in_threadpool(post_reader.get_posts)
    return render_page(request, page_state, "posts/list.html", {"posts": posts})


@router.get("/posts/{slug}", response_class=HTMLResponse)
async def post_detail(
    slug: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    post_reader: PostReader = Depends(get_post_reader),
    taxonomy_reader: TaxonomyReader = Depends(get_taxonomy_reader),
    profile_reader: ProfileReader = Depends(get_profile_reader),
):
    """Post form; ``new`` opens it in create mode"""
    result, categories, authors = await run_concurrently(
        partial(post_reader.get_post, slug),
        taxonomy_reader.get_categories,
        profile_reader.get_authors,
    )

    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No post found.")

    post = row_or_none(result)
    translations = []
    if post is not None:
        # Depends on the post row, so it runs after the fan-out
        translations = await run_in_threadpool(post_reader.get_post_translations, post.translation_group_id)

    return render_page(
        request,
        page_state,
        "posts/form.html",
        {
            "post": post,
            "categories": categories,
            "authors": authors,
            "translations": translations,
        },
    )
