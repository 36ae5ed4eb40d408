"""
Web app manifest
"""
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from cms_admin.core.config import get_settings

router = APIRouter(tags=["manifest"])


@router.get("/manifest.webmanifest")
async def manifest():
    """Static installability metadata"""
    settings = get_settings()
    return JSONResponse(
        {
            "name": settings.manifest_name,
            "short_name": settings.manifest_short_name,
            "description": settings.manifest_description,
            "start_url": settings.manifest_start_url,
            "display": settings.manifest_display,
            "background_color": settings.manifest_background_color,
            "theme_color": settings.manifest_theme_color,
            "icons": [
                {
                    "src": settings.manifest_icon_src,
                    "type": settings.manifest_icon_type,
                    "sizes": settings.manifest_icon_sizes,
                },
            ],
        },
        media_type="application/manifest+json",
    )
