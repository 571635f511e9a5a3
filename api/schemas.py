"""API-specific response models."""

from pydantic import BaseModel
from typing import List, Optional

from models import PlayerScore, SessionState


class SessionResponse(BaseModel):
    """What the UI needs to draw the current session."""
    phase: str
    filename: Optional[str] = None
    preview_url: Optional[str] = None
    scorecard_data: Optional[List[PlayerScore]] = None
    error: Optional[str] = None
    is_loading: bool = False
    can_extract: bool = False
    is_signed_in: bool = False
    can_save: bool = False
    save_status: str
    save_success: bool = False
    save_error: Optional[str] = None
    auth_error: Optional[str] = None


def session_response(state: SessionState) -> SessionResponse:
    """Project the session state into its API shape."""
    return SessionResponse(
        phase=state.phase.value,
        filename=state.image.filename if state.image else None,
        preview_url="/api/scan/preview" if state.preview_ref else None,
        scorecard_data=state.scorecard_data,
        error=state.error,
        is_loading=state.is_loading,
        can_extract=state.can_extract,
        is_signed_in=state.is_signed_in,
        can_save=state.can_save,
        save_status=state.save_status.value,
        save_success=state.save_success,
        save_error=state.save_error,
        auth_error=state.auth_error,
    )
