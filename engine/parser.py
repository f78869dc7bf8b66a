"""Tolerant decoding of analysis-service payloads.

The service is loosely typed: ``issues`` may be missing, ``null`` or the wrong
shape, and ``overallAssessment`` may be absent.  Instead of rejecting the whole
payload, each field is read on its own and defaulted when it is unusable.
Only a payload that is not a JSON object at all is treated as a failure.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any

from engine.errors import TransportError
from engine.messages import MALFORMED_RESPONSE_MESSAGE, REMOTE_FAILURE_FALLBACK
from schemas.response import AnalysisResult, Issue

logger = logging.getLogger("detector.engine.parser")

_ISSUE_FIELDS = ("sentence", "bias", "issue", "solution")


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


def _parse_issues(raw: Any) -> list[Issue]:
    # Strings are sequences too, but never a list of issues.
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.warning("Ignoring non-list issues of type %s.", type(raw).__name__)
        return []

    issues: list[Issue] = []
    for position, item in enumerate(raw):
        if not isinstance(item, Mapping):
            logger.warning("Dropping issue #%d: expected an object, got %s.", position + 1, type(item).__name__)
            continue
        issues.append(Issue(**{name: _as_text(item.get(name)) for name in _ISSUE_FIELDS}))
    return issues


def parse_result(payload: Any) -> AnalysisResult:
    """Build an :class:`AnalysisResult` from a decoded success body."""
    if not isinstance(payload, Mapping):
        raise TransportError(MALFORMED_RESPONSE_MESSAGE)

    assessment = payload.get("overallAssessment")
    return AnalysisResult(
        severity=_as_text(payload.get("severity")),
        overall_assessment=assessment if isinstance(assessment, str) else "",
        issues=_parse_issues(payload.get("issues")),
    )


def parse_error_message(body: bytes | str | None) -> str:
    """Extract ``error`` from a non-2xx body, or fall back to a fixed message."""
    if not body:
        return REMOTE_FAILURE_FALLBACK
    try:
        data = json.loads(body)
    except ValueError:
        logger.debug("Error body is not JSON: %r", body[:200])
        return REMOTE_FAILURE_FALLBACK

    if isinstance(data, Mapping):
        message = data.get("error")
        if isinstance(message, str) and message:
            return message
    return REMOTE_FAILURE_FALLBACK
