"""Image intake: picking a file, previewing it, and clearing the session."""

import logging
import tempfile
from pathlib import Path
from typing import Optional

from models import ImageFile, SaveStatus, SessionState
from session.protocols import PreviewStore

logger = logging.getLogger(__name__)

MIME_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
    ".heic": "image/heic",
}

_SUFFIXES = {v: k for k, v in MIME_TYPES.items()}


# --- Preview references ---

class TempFilePreviewStore:
    """Writes each selected image to a temp file; the path is the reference."""

    def __init__(self, directory: Optional[str | Path] = None):
        self.directory = str(directory) if directory is not None else None

    def create(self, image: ImageFile) -> str:
        suffix = Path(image.filename).suffix.lower() or _SUFFIXES.get(image.content_type, "")
        with tempfile.NamedTemporaryFile(
            delete=False, suffix=suffix, prefix="scorecard-preview-", dir=self.directory
        ) as tmp:
            tmp.write(image.data)
            return tmp.name

    def release(self, ref: str) -> None:
        Path(ref).unlink(missing_ok=True)


# --- Transitions ---

def _release_preview(state: SessionState, previews: PreviewStore) -> None:
    if state.preview_ref is not None:
        previews.release(state.preview_ref)


def select_image(
    state: SessionState,
    image: Optional[ImageFile],
    previews: PreviewStore,
) -> SessionState:
    """Start over with a newly picked image.

    No file selected is a no-op. Otherwise prior data, errors and save
    status are discarded and the old preview is released before the new
    one is created. Sign-in is kept.
    """
    if image is None:
        return state

    _release_preview(state, previews)
    preview_ref = previews.create(image)
    logger.info(
        "Image selected filename=%s content_type=%s bytes=%d",
        image.filename, image.content_type, image.size,
    )
    return SessionState(
        image=image,
        preview_ref=preview_ref,
        is_signed_in=state.is_signed_in,
        auth_error=state.auth_error,
        generation=state.generation + 1,
    )


def reset(state: SessionState, previews: PreviewStore) -> SessionState:
    """Release the preview and clear everything derived from the image.

    Calling it on an already-empty session returns an equal state.
    """
    if state.image is None and state.preview_ref is None and _is_clear(state):
        return state

    _release_preview(state, previews)
    return SessionState(
        is_signed_in=state.is_signed_in,
        auth_error=state.auth_error,
        generation=state.generation + 1,
    )


def _is_clear(state: SessionState) -> bool:
    return (
        state.scorecard_data is None
        and state.error is None
        and not state.is_loading
        and state.save_status == SaveStatus.IDLE
        and state.save_error is None
    )
