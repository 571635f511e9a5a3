"""Scorecard upload, extraction and output endpoints."""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response
from pydantic import ValidationError

from api.dependencies import get_controller
from api.schemas import SessionResponse, session_response
from models import ImageFile
from session.controller import ScorecardController
from session.exceptions import OperationInProgressError
from views.scorecard_table import ARTIFACT_FILENAME, ScorecardTable, render, render_html

router = APIRouter()


@router.get("/state", response_model=SessionResponse)
async def get_state(controller: ScorecardController = Depends(get_controller)):
    return session_response(controller.state)


@router.post("/image", response_model=SessionResponse)
async def upload_image(
    file: UploadFile = File(...),
    controller: ScorecardController = Depends(get_controller),
):
    """Select a new scorecard image. Clears any previous result."""
    content_type = file.content_type or ""
    if not content_type.lower().startswith("image/"):
        raise HTTPException(400, f"Unsupported content type: {content_type or 'unknown'}. Please upload an image.")

    data = await file.read()
    if not data:
        raise HTTPException(400, "Empty image payload")

    try:
        image = ImageFile(filename=file.filename or "scorecard", content_type=content_type, data=data)
    except ValidationError as e:
        raise HTTPException(400, e.errors()[0]["msg"])

    return session_response(controller.select_image(image))


@router.get("/preview")
async def get_preview(controller: ScorecardController = Depends(get_controller)):
    state = controller.state
    if state.preview_ref is None or state.image is None:
        raise HTTPException(404, "No image selected")
    return FileResponse(state.preview_ref, media_type=state.image.content_type)


@router.post("/extract", response_model=SessionResponse)
async def extract(controller: ScorecardController = Depends(get_controller)):
    """Run extraction on the selected image. Failures come back in `error`."""
    if controller.state.image is None:
        raise HTTPException(400, "No image selected")
    try:
        state = await controller.extract()
    except OperationInProgressError as e:
        raise HTTPException(409, str(e))
    return session_response(state)


@router.post("/reset", response_model=SessionResponse)
async def reset(controller: ScorecardController = Depends(get_controller)):
    return session_response(controller.reset())


def _require_data(controller: ScorecardController):
    data = controller.state.scorecard_data
    if data is None:
        raise HTTPException(404, "No scorecard data extracted yet")
    return data


@router.get("/table", response_model=ScorecardTable)
async def get_table(controller: ScorecardController = Depends(get_controller)):
    return render(_require_data(controller))


@router.get("/table.html", response_class=HTMLResponse)
async def get_table_html(controller: ScorecardController = Depends(get_controller)):
    return HTMLResponse(render_html(_require_data(controller)))


@router.get("/json", response_class=PlainTextResponse)
async def get_json(controller: ScorecardController = Depends(get_controller)):
    """Indented JSON as plain text, for copying to the clipboard."""
    _require_data(controller)
    return PlainTextResponse(controller.scorecard_json())


@router.get("/scorecard.json")
async def download_json(controller: ScorecardController = Depends(get_controller)):
    _require_data(controller)
    return Response(
        content=controller.scorecard_json(),
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{ARTIFACT_FILENAME}"'},
    )
