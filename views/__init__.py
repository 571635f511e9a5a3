from views.scorecard_table import (
    ARTIFACT_FILENAME,
    HEADERS,
    PLACEHOLDER,
    ScorecardTable,
    render,
    render_html,
    scorecard_json,
)

__all__ = [
    "ARTIFACT_FILENAME",
    "HEADERS",
    "PLACEHOLDER",
    "ScorecardTable",
    "render",
    "render_html",
    "scorecard_json",
]
