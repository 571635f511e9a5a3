from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional

from .player_score import PlayerScore


class Phase(str, Enum):
    """Where the session is in the upload/extract flow."""
    NO_IMAGE = "no_image"
    PREVIEWING = "previewing"
    EXTRACTING = "extracting"
    EXTRACTED = "extracted"
    ERROR = "error"


class SaveStatus(str, Enum):
    IDLE = "idle"
    SAVING = "saving"
    SAVED = "saved"
    FAILED = "failed"


class ImageFile(BaseModel):
    """An image the user picked, held in memory for the session."""
    model_config = ConfigDict(frozen=True)

    filename: str
    content_type: str
    data: bytes = Field(..., repr=False)

    @field_validator("content_type")
    @classmethod
    def must_be_image(cls, v: str) -> str:
        if not v.lower().startswith("image/"):
            raise ValueError(f"Unsupported content type: {v}. Expected an image/* type.")
        return v

    @property
    def size(self) -> int:
        return len(self.data)


class SessionState(BaseModel):
    """Everything the UI shows for one session.

    Frozen: every transition builds a new value with ``model_copy(update=...)``.
    ``generation`` moves forward on each new image and on reset, so a result
    that comes back for an older generation can be recognised and dropped.
    """
    model_config = ConfigDict(frozen=True)

    image: Optional[ImageFile] = None
    preview_ref: Optional[str] = None
    scorecard_data: Optional[List[PlayerScore]] = None
    error: Optional[str] = None
    is_loading: bool = False
    is_signed_in: bool = False
    save_status: SaveStatus = SaveStatus.IDLE
    save_error: Optional[str] = None
    auth_error: Optional[str] = None
    generation: int = 0

    @model_validator(mode="after")
    def data_absent_or_non_empty(self):
        if self.scorecard_data is not None and len(self.scorecard_data) == 0:
            raise ValueError("scorecard_data must be absent or hold at least one player")
        return self

    @property
    def phase(self) -> Phase:
        if self.image is None:
            return Phase.NO_IMAGE
        if self.is_loading:
            return Phase.EXTRACTING
        if self.scorecard_data is not None:
            return Phase.EXTRACTED
        if self.error is not None:
            return Phase.ERROR
        return Phase.PREVIEWING

    @property
    def is_saving(self) -> bool:
        return self.save_status == SaveStatus.SAVING

    @property
    def save_success(self) -> bool:
        return self.save_status == SaveStatus.SAVED

    @property
    def can_extract(self) -> bool:
        return self.image is not None and not self.is_loading and not self.is_saving

    @property
    def can_save(self) -> bool:
        return (
            self.scorecard_data is not None
            and self.is_signed_in
            and not self.is_loading
            and not self.is_saving
        )
