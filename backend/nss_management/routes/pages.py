"""
NSS Management Backend: Landing Page Route
============================================

What:  Serves the single-page management UI (index.html) at GET /.
How:   Reads from settings.static_root; a missing file is a 404 like any
       other lookup miss.
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

from nss_management.config import settings
from nss_management.exceptions import NotFoundError

router = APIRouter(tags=["Pages"])


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    page = Path(settings.static_root).resolve() / "index.html"
    if not page.is_file():
        raise NotFoundError(resource="Page", resource_id="index.html")
    return FileResponse(path=str(page), media_type="text/html")
