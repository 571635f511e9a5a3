from session.intake import TempFilePreviewStore, reset, select_image
from session.controller import ScorecardController, EMPTY_RESULT_MESSAGE
from session.exceptions import OperationInProgressError
from session.protocols import PreviewStore, ScorecardExtractor, SheetSyncClient

__all__ = [
    "TempFilePreviewStore",
    "reset",
    "select_image",
    "ScorecardController",
    "EMPTY_RESULT_MESSAGE",
    "OperationInProgressError",
    "PreviewStore",
    "ScorecardExtractor",
    "SheetSyncClient",
]
