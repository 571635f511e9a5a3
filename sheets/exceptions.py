class SheetSyncError(Exception):
    """Base for all Google Sheets sync errors."""


class NotInitializedError(SheetSyncError):
    """The sheets client was used before initialize() finished."""

    def __init__(self, message: str = "Google Sheets client is not initialized yet. Please try again in a moment."):
        super().__init__(message)


class NotSignedInError(SheetSyncError):
    """A save was attempted without a signed-in Google account."""

    def __init__(self, message: str = "Please sign in with Google before saving to the sheet."):
        super().__init__(message)


class AuthenticationError(SheetSyncError):
    """The consent flow was denied or failed."""


class AppendError(SheetSyncError):
    """The append call to the Sheets API failed. Nothing was written."""

    def __init__(self, reason: str):
        self.reason = reason
        super().__init__(f"Failed to save data to Google Sheet. Reason: {reason}")
