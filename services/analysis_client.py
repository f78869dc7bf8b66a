"""HTTP client for the remote text-analysis service."""

from __future__ import annotations

import logging

import httpx

from engine.errors import RemoteRejection, TransportError
from engine.parser import parse_error_message, parse_result
from schemas.request import AnalysisRequest
from schemas.response import AnalysisResult

logger = logging.getLogger("detector.analysis_client")

DEFAULT_PATH = "/api/analyze-text"


class AnalysisClient:
    """Sends one ``AnalysisRequest`` per call and decodes the reply.

    Parameters
    ----------
    base_url : str
        Origin of the analysis service, e.g. ``http://localhost:3000``.
    path : str
        Endpoint path; the service exposes ``/api/analyze-text``.
    timeout : float | None
        Seconds to wait for the service.  ``None`` waits indefinitely.
    transport : httpx.AsyncBaseTransport, optional
        Custom transport, mainly for tests (``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str,
        *,
        path: str = DEFAULT_PATH,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._url = base_url.rstrip("/") + "/" + path.lstrip("/")
        self._timeout = httpx.Timeout(timeout)
        self._transport = transport

    @property
    def url(self) -> str:
        return self._url

    async def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        """POST *request* and return the decoded result.

        Raises
        ------
        RemoteRejection
            The service answered with a non-2xx status.
        TransportError
            The request failed or the success body is not a JSON object.
        """
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                resp = await client.post(
                    self._url,
                    json=request.model_dump(),
                    headers={"Content-Type": "application/json"},
                )
        except httpx.RequestError as exc:
            logger.error("Analysis request to %s failed: %r", self._url, exc)
            raise TransportError(str(exc)) from exc

        if not resp.is_success:
            message = parse_error_message(resp.content)
            logger.warning("Analysis service rejected request — status=%d message=%s", resp.status_code, message)
            raise RemoteRejection(message, resp.status_code)

        try:
            payload = resp.json()
        except ValueError as exc:
            logger.error("Analysis service returned invalid JSON: %s\nRaw: %s", exc, resp.text[:500])
            raise TransportError(f"Invalid JSON in analysis response: {exc}") from exc

        return parse_result(payload)
