"""Tests for the analysis client and the notification sinks."""

from __future__ import annotations

import json
import logging

import httpx
import pytest

from engine.errors import RemoteRejection, TransportError
from schemas.request import AnalysisRequest
from schemas.response import NotificationKind, NotificationVariant
from services.analysis_client import AnalysisClient
from services.notifier import (
    LoggingNotifier,
    ToastQueue,
    analysis_complete,
    analysis_failed,
    validation_error,
)


def _client(handler) -> AnalysisClient:
    return AnalysisClient("http://analysis.test/", transport=httpx.MockTransport(handler))


# ── Analysis client ────────────────────────────────────────────────────

class TestAnalysisClient:
    def test_url_join(self):
        assert AnalysisClient("http://a.test/").url == "http://a.test/api/analyze-text"
        assert AnalysisClient("http://a.test", path="v2/analyze").url == "http://a.test/v2/analyze"

    @pytest.mark.asyncio
    async def test_wire_request(self):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"severity": "low", "overallAssessment": "Fine."})

        result = await _client(handler).analyze(AnalysisRequest(text="Hello"))

        assert result.severity == "low"
        request = seen[0]
        assert request.method == "POST"
        assert str(request.url) == "http://analysis.test/api/analyze-text"
        assert request.headers["content-type"] == "application/json"
        assert json.loads(request.content) == {"text": "Hello"}

    @pytest.mark.asyncio
    async def test_non_2xx_raises_remote_rejection(self):
        client = _client(lambda request: httpx.Response(429, json={"error": "slow down"}))

        with pytest.raises(RemoteRejection) as excinfo:
            await client.analyze(AnalysisRequest(text="Hello"))

        assert str(excinfo.value) == "slow down"
        assert excinfo.value.status_code == 429

    @pytest.mark.asyncio
    async def test_invalid_success_json_raises_transport_error(self):
        client = _client(lambda request: httpx.Response(200, content=b"not json"))

        with pytest.raises(TransportError, match="Invalid JSON"):
            await client.analyze(AnalysisRequest(text="Hello"))

    @pytest.mark.asyncio
    async def test_wrapped_payload_is_not_unwrapped(self):
        client = _client(lambda request: httpx.Response(200, json=[{"severity": "low"}]))

        with pytest.raises(TransportError, match="Malformed analysis response"):
            await client.analyze(AnalysisRequest(text="Hello"))

    @pytest.mark.asyncio
    async def test_connection_error_raises_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(TransportError, match="connection refused"):
            await _client(handler).analyze(AnalysisRequest(text="Hello"))


# ── Notifiers ──────────────────────────────────────────────────────────

class TestNotifiers:
    def test_catalog(self):
        assert validation_error().kind == NotificationKind.VALIDATION_ERROR
        assert validation_error().title == "Error"
        assert analysis_complete().variant == NotificationVariant.INFORMATIONAL
        assert analysis_complete().description == "Text has been analyzed for potential bias."
        assert analysis_failed("boom").description == "boom"
        assert analysis_failed("").description == "An unknown error occurred. Please try again."

    def test_toast_queue_drain(self):
        queue = ToastQueue()
        queue.notify(validation_error())
        queue.notify(analysis_complete())

        assert len(queue.pending) == 2
        drained = queue.drain()
        assert [n.kind for n in drained] == [NotificationKind.VALIDATION_ERROR, NotificationKind.ANALYSIS_COMPLETE]
        assert queue.drain() == []

    def test_logging_notifier_levels(self, caplog):
        notifier = LoggingNotifier()
        with caplog.at_level(logging.INFO, logger="detector.notifications"):
            notifier.notify(analysis_complete())
            notifier.notify(analysis_failed("boom"))

        levels = [r.levelno for r in caplog.records if r.name == "detector.notifications"]
        assert levels == [logging.INFO, logging.WARNING]
