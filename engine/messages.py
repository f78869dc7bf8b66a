"""User-facing copy for the detector."""

# ── Fallbacks ──────────────────────────────────────────────────────────

REMOTE_FAILURE_FALLBACK = "Failed to analyze text"
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred. Please try again."
MALFORMED_RESPONSE_MESSAGE = "Malformed analysis response"

# ── Notifications ──────────────────────────────────────────────────────

VALIDATION_TITLE = "Error"
VALIDATION_DESCRIPTION = "Please enter some text to analyze."

FAILED_TITLE = "Analysis Failed"

COMPLETE_TITLE = "Analysis Complete"
COMPLETE_DESCRIPTION = "Text has been analyzed for potential bias."

# ── Presentation ───────────────────────────────────────────────────────

NO_ASSESSMENT = "No assessment available."
NO_ISSUES = "No specific issues were found in the analysis."

RESULTS_HEADING = "Analysis Results"
SUBMIT_LABEL = "Analyze for Bias"
SUBMIT_BUSY_LABEL = "Analyzing..."
