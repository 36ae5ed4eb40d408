"""
Page routes for books
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from starlette.concurrency import run_in_threadpool

from cms_admin.api.deps import (get_account_state, get_book_reader,
                                render_not_found, render_page)
from cms_admin.core.results import Failed, row_or_none
from cms_admin.core.state import PageState
from cms_admin.services.book_reader import BookReader

router = APIRouter(tags=["books_pages"])


@router.get("/books/{book_id}", response_class=HTMLResponse)
async def book_detail(
    book_id: str,
    request: Request,
    page_state: PageState = Depends(get_account_state),
    book_reader: BookReader = Depends(get_book_reader),
):
    result = await run_in_threadpool(book_reader.get_book, book_id)

    if isinstance(result, Failed):
        return render_not_found(request, page_state, "No book found.")

    return render_page(request, page_state, "books/form.html", {"book": row_or_none(result)})
