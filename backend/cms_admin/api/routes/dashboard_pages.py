"""
Home page: task board
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from cms_admin.api.deps import (get_account_state, get_profile_reader,
                                get_task_reader, render_page,
                                run_concurrently)
from cms_admin.core.state import PageState
from cms_admin.services.profile_reader import ProfileReader
from cms_admin.services.task_reader import TaskReader

router = APIRouter(tags=["dashboard_pages"])


@router.get("/", response_class=HTMLResponse)
async def home(
    request: Request,
    page_state: PageState = Depends(get_account_state),
    task_reader: TaskReader = Depends(get_task_reader),
    profile_reader: ProfileReader = Depends(get_profile_reader),
):
    """Tasks with the authors they can be assigned to"""
    tasks, authors = await run_concurrently(task_reader.get_tasks, profile_reader.get_authors)

    return render_page(request, page_state, "dashboard.html", {"tasks": tasks, "profiles": authors})
