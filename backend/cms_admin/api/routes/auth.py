"""
Authentication API routes
"""
from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse, RedirectResponse
from pydantic import BaseModel, Field
from sqlalchemy.exc import SQLAlchemyError
from starlette.concurrency import run_in_threadpool

from cms_admin.core.auth import LOGIN_PATH, AuthProvider, get_auth_provider
from cms_admin.core.logging_config import LoggingConfig

logger = LoggingConfig.get_logger(__name__)

router = APIRouter(prefix="/api/auth", tags=["auth"])


class LoginRequest(BaseModel):
    """Sign-in request"""
    email: str = Field(..., min_length=3, max_length=255)
    password: str = Field(..., min_length=1)


@router.post("/login")
async def login(
    payload: LoginRequest,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """Sign in and set the session cookie"""
    try:
        token = await run_in_threadpool(auth_provider.sign_in, payload.email, payload.password)
    except SQLAlchemyError as e:
        logger.error(f"Error signing in: {e}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Sign-in failed"
        )

    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )

    response = JSONResponse({"ok": True, "redirect": "/"})
    auth_provider.set_session_cookie(response, token)
    return response


@router.post("/signout", name="signout")
async def signout(
    request: Request,
    auth_provider: AuthProvider = Depends(get_auth_provider),
):
    """
    Invalidate the session and go back to the login page.

    Submitted as a plain form POST; the body is not read.
    """
    token = request.cookies.get(auth_provider.cookie_name)
    if token:
        try:
            await run_in_threadpool(auth_provider.sign_out, token)
        except SQLAlchemyError as e:
            # Still clear cookie even if the session row could not be removed
            logger.error(f"Error signing out: {e}", exc_info=True)

    response = RedirectResponse(url=LOGIN_PATH, status_code=status.HTTP_303_SEE_OTHER)
    response.delete_cookie(key=auth_provider.cookie_name)
    return response
