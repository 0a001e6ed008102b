from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field, StrictInt

from config.settings import Settings, get_settings
from frame import (
    Invalid,
    TransitionResult,
    main_image_url,
    meta_tags,
    render_entry,
    resolve,
)
from frame.logic import ASSETS_PATH
from frame.render import ACTION_PATH


logger = logging.getLogger("goat_frame")

templates = Jinja2Templates(directory=Path(__file__).parent / "templates")

FALLBACK_LABELS = ("Error Occurred", "Try Again")


class UntrustedData(BaseModel):
    button_index: StrictInt = Field(..., description="1-based position of the pressed button")


class FrameRequest(BaseModel):
    untrusted_data: UntrustedData


class ButtonOut(BaseModel):
    label: str


class FrameResponse(BaseModel):
    image: str
    buttons: List[ButtonOut]


def frame_response(result: TransitionResult, domain: str) -> FrameResponse:
    """Translate a resolver result into the payload the client re-renders.

    ``Invalid`` never becomes an error status: the caller gets the main
    image with a retry row so the card stays on screen.
    """
    if isinstance(result, Invalid):
        logger.warning("Failed to process button click: %s", result.reason)
        return FrameResponse(
            image=main_image_url(domain),
            buttons=[ButtonOut(label=label) for label in FALLBACK_LABELS],
        )
    return FrameResponse(
        image=result.image_url,
        buttons=[ButtonOut(label=button.label) for button in result.buttons],
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    if not settings.domain:
        raise RuntimeError("DOMAIN not set. Please configure it in environment or .env")

    logging.basicConfig(
        level=settings.log_level,
        format="[%(asctime)s] %(levelname)s - %(message)s",
    )

    app = FastAPI(title=settings.frame_title, version="1.0.0")
    app.state.settings = settings

    # CORS: allow local debugging tools during development
    if settings.is_dev:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=["*"],
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
        )
        return response

    app.mount(
        ASSETS_PATH,
        StaticFiles(directory=settings.assets_dir, check_dir=False),
        name="assets",
    )

    @app.get("/", response_class=HTMLResponse)
    async def index(request: Request):
        descriptor = render_entry(settings.domain)
        return templates.TemplateResponse(
            request,
            "frame.html",
            {"title": settings.frame_title, "tags": meta_tags(descriptor)},
        )

    @app.post(ACTION_PATH, response_model=FrameResponse)
    def handle_frame(req: FrameRequest) -> FrameResponse:
        button_index = req.untrusted_data.button_index
        logger.info("Received button click: %s", button_index)
        return frame_response(resolve(button_index, settings.domain), settings.domain)

    @app.get("/health")
    def health() -> Dict[str, Any]:
        return {"status": "ok"}

    return app


# Served with: uvicorn app.main:create_app --factory
if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(create_app(settings), host=settings.host, port=settings.port)
