"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from leafid.config import Settings
from leafid.controller import ViewController


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_controller(request: Request) -> ViewController:
    return request.app.state.controller
