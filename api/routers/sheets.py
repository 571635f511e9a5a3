"""Google sign-in and save-to-sheet endpoints."""

from fastapi import APIRouter, Depends, HTTPException

from api.dependencies import get_controller
from api.schemas import SessionResponse, session_response
from session.controller import ScorecardController
from session.exceptions import OperationInProgressError

router = APIRouter()


@router.post("/sign-in", response_model=SessionResponse)
async def sign_in(controller: ScorecardController = Depends(get_controller)):
    """Open the Google consent prompt. The outcome is in `is_signed_in` / `auth_error`."""
    return session_response(await controller.sign_in())


@router.post("/sign-out", response_model=SessionResponse)
async def sign_out(controller: ScorecardController = Depends(get_controller)):
    return session_response(await controller.sign_out())


@router.post("/save", response_model=SessionResponse)
async def save(controller: ScorecardController = Depends(get_controller)):
    """Append the extracted scorecard to the sheet. Failures come back in `save_error`."""
    try:
        state = await controller.save()
    except OperationInProgressError as e:
        raise HTTPException(409, str(e))
    return session_response(state)
