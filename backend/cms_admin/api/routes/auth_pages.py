"""
Authentication web pages
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from cms_admin.core.templates import render_template

router = APIRouter()


@router.get("/login", response_class=HTMLResponse)
async def login_page(request: Request):
    """Login page"""
    return render_template("auth/login.html", {}, request)
