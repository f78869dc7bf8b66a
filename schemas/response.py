"""Response schemas for the detector."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field


# ── Enums ──────────────────────────────────────────────────────────────

class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class SeverityTier(str, Enum):
    SUCCESS = "success-tier"
    WARNING = "warning-tier"
    DESTRUCTIVE = "destructive-tier"
    NEUTRAL = "neutral-tier"


class IconCategory(str, Enum):
    AFFIRMATIVE = "affirmative"
    WARNING = "warning"
    NEUTRAL = "neutral"


class NotificationKind(str, Enum):
    VALIDATION_ERROR = "validation-error"
    ANALYSIS_FAILED = "analysis-failed"
    ANALYSIS_COMPLETE = "analysis-complete"


class NotificationVariant(str, Enum):
    INFORMATIONAL = "informational"
    DESTRUCTIVE = "destructive"


# ── Analysis result (wire shape) ───────────────────────────────────────

class Issue(BaseModel):
    sentence: str = ""
    bias: str = ""
    issue: str = ""
    solution: str = ""


class AnalysisResult(BaseModel):
    """Body returned by the analysis service on success, without any envelope.

    ``severity`` keeps the raw wire value; anything outside
    :class:`Severity` is shown with the neutral tier.
    """

    model_config = ConfigDict(populate_by_name=True)

    severity: str
    overall_assessment: str = Field(default="", alias="overallAssessment")
    issues: list[Issue] = Field(default_factory=list)


# ── Interaction state ──────────────────────────────────────────────────

class Idle(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["idle"] = "idle"


class Analyzing(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["analyzing"] = "analyzing"


class Success(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    result: AnalysisResult


class Failure(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    message: str


InteractionState = Annotated[Idle | Analyzing | Success | Failure, Field(discriminator="status")]


# ── Notifications ──────────────────────────────────────────────────────

class Notification(BaseModel):
    kind: NotificationKind
    title: str
    description: str
    variant: NotificationVariant = NotificationVariant.INFORMATIONAL


# ── Presentation ───────────────────────────────────────────────────────

class IssueRecord(BaseModel):
    number: int = Field(ge=1)
    heading: str = Field(description='Display heading, e.g. "Issue #1".')
    sentence: str
    bias: str
    issue: str
    solution: str


class ResultView(BaseModel):
    """Renderable form of an :class:`AnalysisResult`."""

    severity: str
    tier: SeverityTier
    icon: IconCategory
    badge_label: str
    assessment: str
    assessment_is_placeholder: bool = False
    issues: list[IssueRecord] = Field(default_factory=list)
    issues_placeholder: str | None = None


# ── Top-level response ─────────────────────────────────────────────────

class DetectResponse(BaseModel):
    """Outcome of one ``POST /detect`` submission."""

    state: InteractionState
    view: ResultView | None = None
    rendered: str | None = Field(default=None, description="Plain-text rendering of the view.")
    notifications: list[Notification] = Field(default_factory=list)
    submit_label: str


class ErrorResponse(BaseModel):
    error: str
    detail: str | None = None
