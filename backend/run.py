"""Run script with proper environment loading"""
import os
from pathlib import Path

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent.parent
load_dotenv(BASE_DIR / ".env", override=True)

# Set working directory to backend
os.chdir(Path(__file__).resolve().parent)

if __name__ == "__main__":
    import uvicorn

    from cms_admin.core.config import get_settings
    from main import app

    settings = get_settings()

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
    )
