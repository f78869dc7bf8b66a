"""Failure kinds raised while submitting text for analysis.

None of these escape :class:`engine.controller.AnalysisController`; each one is
turned into a ``Failure`` state plus a single user-facing notification.
"""

from __future__ import annotations


class AnalysisError(Exception):
    """Base class for every analysis failure."""


class TextValidationError(AnalysisError):
    """The submitted text is empty or whitespace only."""


class RemoteRejection(AnalysisError):
    """The analysis service answered with a non-2xx status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class TransportError(AnalysisError):
    """The request did not complete or the response body could not be decoded."""
