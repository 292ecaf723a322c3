"""Upload + analyze endpoints (JSON)."""

from __future__ import annotations

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from leafid.controller import ViewController
from leafid.dependencies import get_controller
from leafid.models.images import UploadedImage
from leafid.models.responses import StateResponse

router = APIRouter()


def _reject_if_busy(controller: ViewController) -> None:
    if controller.busy:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="An analysis is already in progress",
        )


def _state_response(controller: ViewController) -> StateResponse:
    return StateResponse.from_state(controller.state, controller.records())


@router.get("/state", response_model=StateResponse)
async def get_state(controller: ViewController = Depends(get_controller)) -> StateResponse:
    return _state_response(controller)


@router.post("/analyze", response_model=StateResponse)
async def analyze(
    file: UploadFile = File(...),
    controller: ViewController = Depends(get_controller),
) -> StateResponse:
    _reject_if_busy(controller)
    await controller.select(UploadedImage.from_upload(file))
    return _state_response(controller)


@router.post("/reanalyze", response_model=StateResponse)
async def reanalyze(controller: ViewController = Depends(get_controller)) -> StateResponse:
    _reject_if_busy(controller)
    if controller.state.image is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No image to analyze. Upload a leaf photo first.",
        )
    await controller.reanalyze()
    return _state_response(controller)
