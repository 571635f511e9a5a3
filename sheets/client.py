"""Google Sheets sync: sign-in, sign-out, and one-row append."""

import asyncio
import json
import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, List, Optional, Protocol

import httpx
from google.auth.exceptions import GoogleAuthError
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError

from config import SHEET_RANGE, SPREADSHEET_ID
from models import ScorecardData, scorecard_to_json
from sheets.exceptions import (
    AppendError,
    AuthenticationError,
    NotInitializedError,
    NotSignedInError,
)

logger = logging.getLogger(__name__)

StatusCallback = Callable[[bool], None]

UNKNOWN_SAVE_ERROR = "An unknown error occurred while saving to the sheet."


class TokenFlow(Protocol):
    """Anything that can obtain and revoke an OAuth access token."""

    async def request_token(self) -> Any:
        """Run the consent prompt; return credentials with a ``token`` attribute."""
        ...

    async def revoke(self, token: str) -> None:
        ...


def _sheets_service(credentials: Any) -> Any:
    return build("sheets", "v4", credentials=credentials, cache_discovery=False)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision and a ``Z`` suffix."""
    utc = moment.astimezone(timezone.utc)
    return utc.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_row(data: ScorecardData, moment: datetime) -> List[str]:
    """The single row appended per save: timestamp, then the compact JSON."""
    return [format_timestamp(moment), scorecard_to_json(data)]


def _error_reason(err: HttpError) -> str:
    """Pull the provider's message out of an HttpError payload."""
    try:
        payload = json.loads(err.content.decode("utf-8"))
    except (AttributeError, UnicodeDecodeError, ValueError):
        payload = None

    if isinstance(payload, dict):
        error = payload.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
        if isinstance(error, str):
            return payload.get("error_description") or error
    return UNKNOWN_SAVE_ERROR


class GoogleSheetsClient:
    """Appends extracted scorecards to a fixed spreadsheet range.

    Lifecycle:
        client = GoogleSheetsClient(OAuthTokenFlow())
        await client.initialize(on_status_change)
        await client.authenticate()     # browser consent
        await client.append(data)
        await client.sign_out()
    """

    def __init__(
        self,
        token_flow: TokenFlow,
        *,
        spreadsheet_id: str = SPREADSHEET_ID,
        sheet_range: str = SHEET_RANGE,
        service_factory: Callable[[Any], Any] = _sheets_service,
        clock: Callable[[], datetime] = _utc_now,
    ):
        self.spreadsheet_id = spreadsheet_id
        self.sheet_range = sheet_range
        self._token_flow = token_flow
        self._service_factory = service_factory
        self._clock = clock
        self._on_status_change: Optional[StatusCallback] = None
        self._initialized = False
        self._credentials: Optional[Any] = None
        self._service: Optional[Any] = None

    @property
    def is_signed_in(self) -> bool:
        return self._service is not None

    def _require_initialized(self) -> None:
        if not self._initialized:
            raise NotInitializedError()

    def _notify(self, signed_in: bool) -> None:
        if self._on_status_change is not None:
            self._on_status_change(signed_in)

    async def initialize(self, on_status_change: StatusCallback) -> None:
        """Register the sign-in status callback. Must be awaited before use."""
        self._on_status_change = on_status_change
        self._initialized = True
        logger.info(
            "Sheets client ready spreadsheet=%s range=%s",
            self.spreadsheet_id, self.sheet_range,
        )

    async def authenticate(self) -> None:
        """Prompt for consent. Reports the outcome through the status callback.

        Raises:
            NotInitializedError: initialize() has not completed.
            AuthenticationError: The user declined or the provider failed.
        """
        self._require_initialized()
        try:
            credentials = await self._token_flow.request_token()
        except Exception as e:
            logger.warning("Google sign-in failed: %s", e)
            self._notify(False)
            raise AuthenticationError(str(e) or "Google sign-in failed.") from e

        if not getattr(credentials, "token", None):
            self._notify(False)
            raise AuthenticationError("Google sign-in did not return an access token.")

        self._credentials = credentials
        self._service = self._service_factory(credentials)
        logger.info("Signed in to Google Sheets")
        self._notify(True)

    async def sign_out(self) -> None:
        """Revoke the current token (if any) and forget local credentials."""
        self._require_initialized()
        token = getattr(self._credentials, "token", None)
        self._credentials = None
        self._service = None
        if token:
            try:
                await self._token_flow.revoke(token)
            except httpx.HTTPError as e:
                # Local state is already cleared; the token expires on its own.
                logger.warning("Token revocation failed: %s", e)
        logger.info("Signed out of Google Sheets")
        self._notify(False)

    async def append(self, data: ScorecardData) -> Dict[str, Any]:
        """Append ``[timestamp, json]`` as one row. All or nothing.

        Raises:
            NotInitializedError: initialize() has not completed.
            NotSignedInError: No successful authenticate() yet.
            AppendError: The Sheets API call failed.
        """
        self._require_initialized()
        if self._service is None:
            raise NotSignedInError()

        row = build_row(data, self._clock())
        request = self._service.spreadsheets().values().append(
            spreadsheetId=self.spreadsheet_id,
            range=self.sheet_range,
            valueInputOption="USER_ENTERED",
            body={"values": [row]},
        )

        loop = asyncio.get_running_loop()
        try:
            response = await loop.run_in_executor(None, request.execute)
        except HttpError as e:
            reason = _error_reason(e)
            logger.warning("Sheets append failed status=%s reason=%s", e.resp.status, reason)
            raise AppendError(reason) from e
        except (GoogleAuthError, OSError) as e:
            logger.warning("Sheets append failed: %s", e)
            raise AppendError(str(e) or UNKNOWN_SAVE_ERROR) from e

        logger.info(
            "Appended %d player(s) to %s",
            len(data), (response or {}).get("updates", {}).get("updatedRange", self.sheet_range),
        )
        return response


class NullSheetSyncClient:
    """Stand-in used when no OAuth client secrets are configured."""

    NOT_CONFIGURED = "Google Sheets sync is not configured."

    def __init__(self):
        self._on_status_change: Optional[StatusCallback] = None

    @property
    def is_signed_in(self) -> bool:
        return False

    async def initialize(self, on_status_change: StatusCallback) -> None:
        self._on_status_change = on_status_change

    async def authenticate(self) -> None:
        if self._on_status_change is not None:
            self._on_status_change(False)
        raise AuthenticationError(self.NOT_CONFIGURED)

    async def sign_out(self) -> None:
        return None

    async def append(self, data: ScorecardData) -> Dict[str, Any]:
        raise NotSignedInError(self.NOT_CONFIGURED)
