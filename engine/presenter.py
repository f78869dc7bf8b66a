"""Result presenter.

Pure mapping from an :class:`AnalysisResult` to a :class:`ResultView`, with no
state, no I/O.  Re-evaluated from the controller's current state on every
render.
"""

from __future__ import annotations

from engine.messages import NO_ASSESSMENT, NO_ISSUES
from schemas.response import (
    AnalysisResult,
    IconCategory,
    InteractionState,
    IssueRecord,
    ResultView,
    Severity,
    SeverityTier,
    Success,
)

_TIERS: dict[str, SeverityTier] = {
    Severity.LOW.value: SeverityTier.SUCCESS,
    Severity.MEDIUM.value: SeverityTier.WARNING,
    Severity.HIGH.value: SeverityTier.DESTRUCTIVE,
}

_ICONS: dict[str, IconCategory] = {
    Severity.LOW.value: IconCategory.AFFIRMATIVE,
    Severity.MEDIUM.value: IconCategory.WARNING,
    Severity.HIGH.value: IconCategory.WARNING,
}


def severity_tier(severity: str) -> SeverityTier:
    """``low`` → success, ``medium`` → warning, ``high`` → destructive, else neutral."""
    return _TIERS.get(severity, SeverityTier.NEUTRAL)


def severity_icon(severity: str) -> IconCategory:
    return _ICONS.get(severity, IconCategory.NEUTRAL)


def badge_label(severity: str) -> str:
    return f"{severity.title()} Risk" if severity else "Risk"


def present(result: AnalysisResult | None) -> ResultView | None:
    """Build the view for *result*, or ``None`` when there is nothing to show."""
    if result is None:
        return None

    assessment = result.overall_assessment
    has_assessment = bool(assessment and assessment.strip())

    records = [
        IssueRecord(
            number=number,
            heading=f"Issue #{number}",
            sentence=item.sentence,
            bias=item.bias,
            issue=item.issue,
            solution=item.solution,
        )
        for number, item in enumerate(result.issues, start=1)
    ]

    return ResultView(
        severity=result.severity,
        tier=severity_tier(result.severity),
        icon=severity_icon(result.severity),
        badge_label=badge_label(result.severity),
        assessment=assessment if has_assessment else NO_ASSESSMENT,
        assessment_is_placeholder=not has_assessment,
        issues=records,
        issues_placeholder=None if records else NO_ISSUES,
    )


def present_state(state: InteractionState) -> ResultView | None:
    """Only a ``Success`` state has something to render."""
    return present(state.result) if isinstance(state, Success) else None
