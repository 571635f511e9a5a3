"""Application controller: owns the session state and sequences the components."""

import logging
from typing import Optional

from models import ImageFile, SaveStatus, SessionState
from llm.exceptions import ExtractionError
from sheets.exceptions import NotSignedInError, SheetSyncError
from session import intake
from session.exceptions import OperationInProgressError
from session.protocols import PreviewStore, ScorecardExtractor, SheetSyncClient
from views.scorecard_table import scorecard_json

logger = logging.getLogger(__name__)

EMPTY_RESULT_MESSAGE = (
    "Could not extract any player data from the scorecard. "
    "Please try a clearer image."
)
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."
NO_DATA_TO_SAVE_MESSAGE = "There is no scorecard data to save. Extract a scorecard first."
UNKNOWN_SAVE_ERROR_MESSAGE = "An unknown error occurred while saving to the sheet."


class ScorecardController:
    """One interactive session: upload, extract, show, save.

    The state is a frozen SessionState that is replaced on every
    transition. Extraction is gated by the loading flag. At most one append
    is in flight per controller, even across a reset or a new image. A reset
    while either is running does not cancel the external call, it only makes
    the controller ignore the result.
    """

    def __init__(
        self,
        extractor: ScorecardExtractor,
        sheets: SheetSyncClient,
        previews: PreviewStore,
    ):
        self._extractor = extractor
        self._sheets = sheets
        self._previews = previews
        self._state = SessionState()
        self._save_in_flight = False

    @property
    def state(self) -> SessionState:
        return self._state

    def _transition(self, **changes) -> SessionState:
        self._state = self._state.model_copy(update=changes)
        return self._state

    # --- Lifecycle ---

    async def start(self) -> SessionState:
        """Initialize the sheets client. Failure leaves saving unavailable."""
        try:
            await self._sheets.initialize(self._on_sign_in_change)
        except Exception as e:
            logger.exception("Sheets client failed to initialize")
            return self._transition(auth_error=str(e) or UNKNOWN_ERROR_MESSAGE)
        return self._state

    def close(self) -> None:
        """Release the current preview, if any."""
        self._state = intake.reset(self._state, self._previews)

    def _on_sign_in_change(self, signed_in: bool) -> None:
        changes = {"is_signed_in": signed_in}
        if signed_in:
            changes["auth_error"] = None
        elif self._state.save_status != SaveStatus.SAVING:
            changes["save_status"] = SaveStatus.IDLE
        self._transition(**changes)

    # --- Image intake ---

    def select_image(self, image: Optional[ImageFile]) -> SessionState:
        self._state = intake.select_image(self._state, image, self._previews)
        return self._state

    def reset(self) -> SessionState:
        self._state = intake.reset(self._state, self._previews)
        return self._state

    # --- Extraction ---

    async def extract(self) -> SessionState:
        """Run extraction for the current image.

        Re-extracting the same image is allowed once the previous run has
        finished. On failure the image and preview are kept for a retry.

        Raises:
            OperationInProgressError: An extraction or a save is already running.
        """
        state = self._state
        if state.image is None:
            return state
        if state.is_loading:
            raise OperationInProgressError("An extraction is already in progress.")
        if state.is_saving:
            raise OperationInProgressError("Wait for the current save to finish before extracting again.")

        generation = state.generation
        self._transition(
            is_loading=True,
            error=None,
            scorecard_data=None,
            save_status=SaveStatus.IDLE,
            save_error=None,
        )

        data = None
        error: Optional[str] = None
        try:
            data = await self._extractor.extract(state.image)
        except ExtractionError as e:
            error = str(e) or UNKNOWN_ERROR_MESSAGE
        except Exception as e:
            logger.exception("Scorecard extraction failed")
            error = str(e) or UNKNOWN_ERROR_MESSAGE

        if self._state.generation != generation:
            logger.info("Discarding extraction result for a replaced image")
            return self._state

        if error is None and not data:
            error = EMPTY_RESULT_MESSAGE

        if error is not None:
            logger.info("Extraction failed: %s", error)
            return self._transition(is_loading=False, error=error)
        return self._transition(is_loading=False, scorecard_data=list(data))

    # --- Google Sheets ---

    async def sign_in(self) -> SessionState:
        try:
            await self._sheets.authenticate()
        except SheetSyncError as e:
            return self._transition(is_signed_in=False, auth_error=str(e))
        except Exception as e:
            logger.exception("Google sign-in failed")
            return self._transition(is_signed_in=False, auth_error=str(e) or UNKNOWN_ERROR_MESSAGE)
        return self._transition(is_signed_in=True, auth_error=None)

    async def sign_out(self) -> SessionState:
        try:
            await self._sheets.sign_out()
        except SheetSyncError as e:
            logger.warning("Sign-out failed: %s", e)
            return self._transition(auth_error=str(e))
        if self._state.is_saving:
            return self._transition(is_signed_in=False)
        return self._transition(is_signed_in=False, save_status=SaveStatus.IDLE, save_error=None)

    async def save(self) -> SessionState:
        """Append the current scorecard to the sheet.

        Raises:
            OperationInProgressError: A save is already running.
        """
        state = self._state
        if self._save_in_flight or state.is_saving:
            raise OperationInProgressError("A save is already in progress.")
        if state.scorecard_data is None:
            return self._transition(save_status=SaveStatus.FAILED, save_error=NO_DATA_TO_SAVE_MESSAGE)
        if not state.is_signed_in:
            return self._transition(
                save_status=SaveStatus.FAILED,
                save_error=str(NotSignedInError()),
            )

        generation = state.generation
        self._transition(save_status=SaveStatus.SAVING, save_error=None)

        error: Optional[str] = None
        self._save_in_flight = True
        try:
            await self._sheets.append(state.scorecard_data)
        except SheetSyncError as e:
            error = str(e)
        except Exception as e:
            logger.exception("Saving to Google Sheets failed")
            error = str(e) or UNKNOWN_SAVE_ERROR_MESSAGE
        finally:
            self._save_in_flight = False

        if self._state.generation != generation:
            logger.info("Save finished for a replaced image; leaving the new session untouched")
            return self._state

        if error is not None:
            return self._transition(save_status=SaveStatus.FAILED, save_error=error)
        return self._transition(save_status=SaveStatus.SAVED, save_error=None)

    # --- Artifact ---

    def scorecard_json(self) -> Optional[str]:
        """Indented JSON of the current scorecard, for copy or download."""
        if self._state.scorecard_data is None:
            return None
        return scorecard_json(self._state.scorecard_data)
