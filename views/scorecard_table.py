"""Table rendering and the JSON artifact for extracted scorecards.

Pure functions over already-parsed data. Totals are shown as reported,
never recomputed.
"""

import html
from typing import List, Optional

from pydantic import BaseModel

from models import PlayerScore, ScorecardData, scorecard_to_json

PLACEHOLDER = "-"
ARTIFACT_FILENAME = "scorecard.json"

HEADERS: List[str] = (
    ["Player"]
    + [str(n) for n in range(1, 10)]
    + ["OUT"]
    + [str(n) for n in range(10, 19)]
    + ["IN", "TOTAL"]
)


class ScorecardTable(BaseModel):
    """Rendered scorecard: header row plus one row of cells per player."""
    headers: List[str]
    rows: List[List[str]]


def _cell(value: Optional[int]) -> str:
    return PLACEHOLDER if value is None else str(value)


def _render_row(player: PlayerScore) -> List[str]:
    return (
        [player.player_name]
        + [_cell(s) for s in player.front_nine]
        + [_cell(player.out)]
        + [_cell(s) for s in player.back_nine]
        + [_cell(player.in_), _cell(player.total)]
    )


def render(data: ScorecardData) -> ScorecardTable:
    """One row per player, in the order given."""
    return ScorecardTable(headers=list(HEADERS), rows=[_render_row(p) for p in data])


def render_html(data: ScorecardData) -> str:
    """The rendered table as an HTML fragment."""
    table = render(data)
    head = "".join(f'<th scope="col">{html.escape(h)}</th>' for h in table.headers)
    body = "\n".join(
        "<tr>" + "".join(f"<td>{html.escape(cell)}</td>" for cell in row) + "</tr>"
        for row in table.rows
    )
    return (
        '<table class="scorecard">\n'
        f"<thead><tr>{head}</tr></thead>\n"
        f"<tbody>\n{body}\n</tbody>\n"
        "</table>"
    )


def scorecard_json(data: ScorecardData) -> str:
    """Indented JSON offered for copy and as the downloadable scorecard.json."""
    return scorecard_to_json(data, indent=2)
