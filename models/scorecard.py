"""ScorecardData: the ordered list of players extracted from one card."""

from typing import Any, Dict, List

from pydantic import TypeAdapter

from .player_score import PlayerScore

ScorecardData = List[PlayerScore]

scorecard_adapter: TypeAdapter[ScorecardData] = TypeAdapter(ScorecardData)


def scorecard_to_json(data: ScorecardData, indent: int | None = None) -> str:
    """Serialize with wire names (``playerName``, ``in``).

    Compact by default, which is what goes into the sheet row.
    """
    return scorecard_adapter.dump_json(data, by_alias=True, indent=indent).decode("utf-8")


def scorecard_from_json(text: str | bytes) -> ScorecardData:
    """Parse JSON text into ScorecardData. Raises pydantic.ValidationError."""
    return scorecard_adapter.validate_json(text)


def scorecard_json_schema() -> Dict[str, Any]:
    """JSON schema sent to the model as the required response shape."""
    return scorecard_adapter.json_schema(by_alias=True)
