"""HTML page: upload form, preview, and formatted analysis."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from starlette.datastructures import UploadFile

from leafid.config import Settings
from leafid.controller import ViewController
from leafid.dependencies import get_controller, get_settings
from leafid.intake import ACCEPTED_MEDIA_TYPES
from leafid.models.images import UploadedImage

logger = logging.getLogger(__name__)

router = APIRouter()

templates = Jinja2Templates(directory=str(Path(__file__).parent.parent / "templates"))


def _back_to_index() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    controller: ViewController = Depends(get_controller),
    settings: Settings = Depends(get_settings),
) -> HTMLResponse:
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "state": controller.state,
            "records": controller.records(),
            "accept": ",".join(ACCEPTED_MEDIA_TYPES),
            "max_upload_mb": settings.max_upload_bytes // (1024 * 1024),
        },
    )


@router.post("/upload")
async def upload(request: Request, controller: ViewController = Depends(get_controller)) -> RedirectResponse:
    form = await request.form()
    file = form.get("file")
    if not isinstance(file, UploadFile) or not file.filename:
        logger.debug("Upload form submitted without a file")
        return _back_to_index()
    await controller.select(UploadedImage.from_upload(file))
    return _back_to_index()


@router.post("/reanalyze")
async def reanalyze(controller: ViewController = Depends(get_controller)) -> RedirectResponse:
    await controller.reanalyze()
    return _back_to_index()
