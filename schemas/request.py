"""Request schemas for the detector."""

from __future__ import annotations

from pydantic import BaseModel, Field


class AnalysisRequest(BaseModel):
    """Body sent to the remote analysis service: ``{"text": "..."}``."""

    text: str


class DetectRequest(BaseModel):
    """Payload accepted by ``POST /detect``.

    Blank text is not rejected here; the controller turns it into a
    validation notification so that the caller sees the same outcome as the
    interactive view.
    """

    text: str = Field(
        ...,
        max_length=50_000,
        description="Text to check for potential bias.",
    )
