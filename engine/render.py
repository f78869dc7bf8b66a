"""Plain-text rendering of a :class:`ResultView`."""

from __future__ import annotations

from engine.messages import RESULTS_HEADING
from schemas.response import ResultView


def render_text(view: ResultView) -> str:
    lines = [
        f"{RESULTS_HEADING} [{view.badge_label}]",
        "",
        f"Severity: {view.severity.title()}",
        "Assessment:",
        view.assessment,
    ]

    if view.issues_placeholder is not None:
        lines += ["", view.issues_placeholder]
        return "\n".join(lines)

    for record in view.issues:
        lines += [
            "",
            record.heading,
            "Sentence:",
            f'"{record.sentence}"',
            f"➤ {record.issue}",
            f"Bias Type: {record.bias}",
            f"Proposed Solution: {record.solution}",
        ]
    return "\n".join(lines)
