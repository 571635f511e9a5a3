from typing import Optional


# ================================================================
# Prompt fragments
# ================================================================

_PREAMBLE = "You are an expert golf scorecard reader."

_TASK = (
    " Analyze the provided image of a golf scorecard and extract the scores for each player."
    " Identify player names, their scores for each of the 18 holes."
    " If a score is not available for a hole, use null."
    " Calculate the front 9 (OUT), back 9 (IN), and total scores."
    " Ensure the output is a valid JSON array matching the provided schema."
)

_PLAYER_INSTRUCTIONS = """
MULTIPLE PLAYERS:
Scorecards often have rows for multiple players. Return one entry per player row that has a name or any written scores. Skip printed rows such as par, handicap and yardage."""

_SCORING_FORMAT_INSTRUCTIONS = """
SCORING FORMAT:
Assume scores are written as TOTAL STROKES (e.g., "5" on a par 4 means 5 strokes). Circles and squares around a number do not change the stroke count. If a value is illegible, use null rather than guessing."""


def _append_user_context(prompt: str, user_context: Optional[str]) -> str:
    """Append user context to a prompt if provided."""
    if not user_context:
        return prompt
    return prompt + "\nADDITIONAL CONTEXT FROM THE USER:\n" + user_context + "\n"


def build_extraction_prompt(user_context: Optional[str] = None) -> str:
    """Build the instruction sent alongside the scorecard image."""
    prompt = (
        _PREAMBLE
        + _TASK
        + "\n"
        + _PLAYER_INSTRUCTIONS
        + "\n"
        + _SCORING_FORMAT_INSTRUCTIONS
    )
    return _append_user_context(prompt, user_context)
