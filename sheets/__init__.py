from sheets.auth import OAuthTokenFlow
from sheets.client import GoogleSheetsClient, NullSheetSyncClient, build_row, format_timestamp
from sheets.exceptions import (
    SheetSyncError,
    NotInitializedError,
    NotSignedInError,
    AuthenticationError,
    AppendError,
)

__all__ = [
    "OAuthTokenFlow",
    "GoogleSheetsClient",
    "NullSheetSyncClient",
    "build_row",
    "format_timestamp",
    "SheetSyncError",
    "NotInitializedError",
    "NotSignedInError",
    "AuthenticationError",
    "AppendError",
]
