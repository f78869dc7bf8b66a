"""Analysis controller: owns the interaction state for one detector session.

State machine::

    Idle ──submit──▶ Analyzing ──▶ Success(result)
                                └─▶ Failure(message)

``Success`` and ``Failure`` can be left again by another accepted submission,
which always passes through ``Analyzing`` first so that a stale result is
never visible while a new request is running.
"""

from __future__ import annotations

import logging

from engine.errors import AnalysisError, TextValidationError
from engine.messages import (
    SUBMIT_BUSY_LABEL,
    SUBMIT_LABEL,
    UNKNOWN_ERROR_MESSAGE,
    VALIDATION_DESCRIPTION,
)
from schemas.request import AnalysisRequest
from schemas.response import (
    AnalysisResult,
    Analyzing,
    Failure,
    Idle,
    InteractionState,
    Notification,
    Success,
)
from services.analysis_client import AnalysisClient
from services.notifier import (
    LoggingNotifier,
    Notifier,
    analysis_complete,
    analysis_failed,
    validation_error,
)

logger = logging.getLogger("detector.engine.controller")


def _validate(text: str) -> None:
    if not text.strip():
        raise TextValidationError(VALIDATION_DESCRIPTION)


def _describe(exc: BaseException) -> str:
    # Errors without a description are reported generically.
    return str(exc).strip() or UNKNOWN_ERROR_MESSAGE


class AnalysisController:
    """Validates input, runs at most one analysis at a time and keeps the result.

    The controller is the only writer of its state; renderers read it through
    :attr:`state` (or the :attr:`result` / :attr:`error` shortcuts).
    """

    def __init__(self, client: AnalysisClient, notifier: Notifier | None = None) -> None:
        self._client = client
        self._notifier: Notifier = notifier if notifier is not None else LoggingNotifier()
        self._state: InteractionState = Idle()
        self._in_flight = False

    # ── Read side ──────────────────────────────────────────────────────

    @property
    def state(self) -> InteractionState:
        return self._state

    @property
    def is_analyzing(self) -> bool:
        return self._in_flight

    @property
    def result(self) -> AnalysisResult | None:
        return self._state.result if isinstance(self._state, Success) else None

    @property
    def error(self) -> str | None:
        return self._state.message if isinstance(self._state, Failure) else None

    @property
    def submit_label(self) -> str:
        return SUBMIT_BUSY_LABEL if self._in_flight else SUBMIT_LABEL

    # ── Write side ─────────────────────────────────────────────────────

    async def submit(self, text: str) -> InteractionState:
        """Analyse *text* and return the resulting state.

        Blank text is refused before any network activity and leaves the
        current state untouched.  A call made while another analysis is still
        running is ignored.  Every failure ends in ``Failure`` plus one
        notification; nothing is raised to the caller.
        """
        try:
            _validate(text)
        except TextValidationError:
            logger.info("Blank submission refused.")
            self._emit(validation_error())
            return self._state

        if self._in_flight:
            logger.warning("Submission ignored — an analysis is already in flight.")
            return self._state

        self._in_flight = True
        self._state = Analyzing()
        logger.info("Analysis started — %d characters", len(text))

        try:
            result = await self._client.analyze(AnalysisRequest(text=text))
        except AnalysisError as exc:
            self._fail(_describe(exc))
        except Exception as exc:
            logger.exception("Unexpected analysis error")
            self._fail(_describe(exc))
        else:
            self._state = Success(result=result)
            logger.info(
                "Analysis complete — severity=%s issues=%d",
                result.severity or "<none>",
                len(result.issues),
            )
            self._emit(analysis_complete())
        finally:
            self._in_flight = False
            if isinstance(self._state, Analyzing):
                # Interrupted from outside (e.g. task cancellation).
                self._state = Failure(message=UNKNOWN_ERROR_MESSAGE)

        return self._state

    def _fail(self, message: str) -> None:
        logger.warning("Analysis failed: %s", message)
        self._state = Failure(message=message)
        self._emit(analysis_failed(message))

    def _emit(self, notification: Notification) -> None:
        try:
            self._notifier.notify(notification)
        except Exception:
            logger.exception("Notification sink failed for %s", notification.kind.value)
