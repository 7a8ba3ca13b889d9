"""
Movies API — Root Route
========================

What:  GET / returns a small HTML banner confirming the service is up.
"""

import logging

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from movies_api.config import settings

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Root"])


@router.get("/", response_class=HTMLResponse, summary="Service banner")
async def root() -> HTMLResponse:
    logger.debug("GET / banner")
    return HTMLResponse(content=f"<h1>{settings.app_name} Running</h1>", status_code=200)
