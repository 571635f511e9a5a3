from fastapi import Request
from session.controller import ScorecardController


def get_controller(request: Request) -> ScorecardController:
    """FastAPI dependency that provides the session controller."""
    return request.app.state.controller
