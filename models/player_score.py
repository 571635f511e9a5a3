from pydantic import Field, field_validator
from typing import List, Optional

from .base import BaseGolfModel

HOLES_PER_ROUND = 18
FRONT_NINE = slice(0, 9)
BACK_NINE = slice(9, 18)


class PlayerScore(BaseGolfModel):
    """One player's row on the scorecard, exactly as the model read it.

    ``out``, ``in`` and ``total`` are whatever the card (or the model) says.
    Nothing here checks them against the hole scores.
    """
    player_name: str = Field(
        ...,
        alias="playerName",
        min_length=1,
        description="The name of the player.",
    )
    scores: List[Optional[int]] = Field(
        ...,
        min_length=HOLES_PER_ROUND,
        max_length=HOLES_PER_ROUND,
        description="An array of 18 scores, one for each hole. Use null if a score is missing.",
    )
    out: Optional[int] = Field(
        ..., description="Total score for the first 9 holes (front 9)."
    )
    in_: Optional[int] = Field(
        ..., alias="in", description="Total score for the last 9 holes (back 9)."
    )
    total: Optional[int] = Field(
        ..., description="Total score for all 18 holes."
    )

    @field_validator("player_name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("playerName must not be blank")
        return v

    @property
    def front_nine(self) -> List[Optional[int]]:
        """Scores for holes 1-9."""
        return self.scores[FRONT_NINE]

    @property
    def back_nine(self) -> List[Optional[int]]:
        """Scores for holes 10-18."""
        return self.scores[BACK_NINE]

    def get_hole_score(self, hole_number: int) -> Optional[int]:
        if not 1 <= hole_number <= HOLES_PER_ROUND:
            raise ValueError(f"Hole number {hole_number} outside 1-{HOLES_PER_ROUND}")
        return self.scores[hole_number - 1]
