from .base import BaseGolfModel
from .player_score import PlayerScore, HOLES_PER_ROUND
from .scorecard import (
    ScorecardData,
    scorecard_from_json,
    scorecard_json_schema,
    scorecard_to_json,
)
from .session import ImageFile, Phase, SaveStatus, SessionState

__all__ = [
    "BaseGolfModel",
    "PlayerScore",
    "HOLES_PER_ROUND",
    "ScorecardData",
    "scorecard_from_json",
    "scorecard_json_schema",
    "scorecard_to_json",
    "ImageFile",
    "Phase",
    "SaveStatus",
    "SessionState",
]
