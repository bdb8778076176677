"""Serves the generated blog-data.json at the site root."""

import logging
import os

from fastapi import APIRouter, HTTPException
from fastapi.responses import FileResponse

from blogdata.config import get_settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["blog"])


def data_file_exists() -> bool:
    return os.path.isfile(get_settings().output_file)


@router.get("/blog-data.json")
async def get_blog_data() -> FileResponse:
    """Return the generated collection as-is."""
    path = get_settings().output_file
    if not os.path.isfile(path):
        logger.warning("Blog data requested but %s does not exist", path)
        raise HTTPException(status_code=404, detail="Blog data not generated yet")
    return FileResponse(path, media_type="application/json")
