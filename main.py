"""Ethical AI Detector — bias analysis front service.

FastAPI application entry-point.
Each ``POST /detect`` call runs one detector session: the text is validated,
forwarded to the remote analysis service and the outcome is returned as a
state, a presentable view and the notifications raised along the way.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from engine.controller import AnalysisController
from engine.presenter import present_state
from engine.render import render_text
from schemas.request import DetectRequest
from schemas.response import DetectResponse, ErrorResponse, Notification
from services.analysis_client import AnalysisClient
from services.notifier import LoggingNotifier, Notifier, ToastQueue

# ── Logging ────────────────────────────────────────────────────────────

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s | %(name)-30s | %(levelname)-7s | %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger("detector")

VERSION = "0.1.0"


# ── Dependencies ───────────────────────────────────────────────────────

def get_analysis_client() -> AnalysisClient:
    return AnalysisClient(
        settings.analysis_base_url,
        path=settings.analysis_path,
        timeout=settings.request_timeout,
    )


class _SessionNotifier:
    """Queues toasts for the response and mirrors them to the log."""

    def __init__(self, queue: ToastQueue, mirror: Notifier) -> None:
        self._queue = queue
        self._mirror = mirror

    def notify(self, notification: Notification) -> None:
        self._queue.notify(notification)
        self._mirror.notify(notification)


# ── Lifespan ───────────────────────────────────────────────────────────

@asynccontextmanager
async def lifespan(app: FastAPI):  # noqa: ARG001
    logger.info(
        "Detector starting — analysis service=%s%s timeout=%s",
        settings.analysis_base_url,
        settings.analysis_path,
        settings.request_timeout if settings.request_timeout is not None else "none",
    )
    yield
    logger.info("Detector shutting down.")


# ── App ────────────────────────────────────────────────────────────────

app = FastAPI(
    title="Ethical AI Detector",
    description="Analyze text for potential bias and get actionable recommendations.",
    version=VERSION,
    lifespan=lifespan,
)

_origins = [o.strip() for o in settings.allowed_origins.split(",") if o.strip()]

app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ── Routes ─────────────────────────────────────────────────────────────

@app.get("/health")
async def health():
    return {
        "status": "ok",
        "service": "ethical-ai-detector",
        "version": VERSION,
    }


@app.post(
    "/detect",
    response_model=DetectResponse,
    responses={422: {"model": ErrorResponse}},
    summary="Analyze text for potential bias",
    description="Validates the text, forwards it to the analysis service and returns "
    "the interaction state, the presentable result and any notifications.",
)
async def detect(
    payload: DetectRequest,
    client: AnalysisClient = Depends(get_analysis_client),
) -> DetectResponse:
    toasts = ToastQueue()
    controller = AnalysisController(client, _SessionNotifier(toasts, LoggingNotifier()))

    state = await controller.submit(payload.text)
    view = present_state(state)

    return DetectResponse(
        state=state,
        view=view,
        rendered=render_text(view) if view is not None else None,
        notifications=toasts.drain(),
        submit_label=controller.submit_label,
    )


# ── Dev runner ─────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
        reload=True,
    )
