"""OAuth token flow for the Sheets scope.

Credentials live in memory only; nothing is written to disk.
"""

import asyncio
import logging
from pathlib import Path
from typing import List, Optional

import httpx
from google.oauth2.credentials import Credentials
from google_auth_oauthlib.flow import InstalledAppFlow

from config import GOOGLE_CLIENT_SECRETS_FILE, SHEETS_SCOPES

logger = logging.getLogger(__name__)

REVOKE_URL = "https://oauth2.googleapis.com/revoke"


class OAuthTokenFlow:
    """Interactive consent through google-auth-oauthlib's local-server flow.

    ``request_token`` opens the browser consent screen and resolves once with
    credentials, or raises once if the user denies access or the flow fails.
    """

    def __init__(
        self,
        client_secrets_file: Path = GOOGLE_CLIENT_SECRETS_FILE,
        scopes: Optional[List[str]] = None,
    ):
        self.client_secrets_file = Path(client_secrets_file)
        self.scopes = scopes or list(SHEETS_SCOPES)

    def _run_flow(self) -> Credentials:
        flow = InstalledAppFlow.from_client_secrets_file(
            str(self.client_secrets_file), self.scopes
        )
        return flow.run_local_server(port=0, open_browser=True)

    async def request_token(self) -> Credentials:
        if not self.client_secrets_file.exists():
            raise FileNotFoundError(
                f"OAuth client secrets not found: {self.client_secrets_file}"
            )
        # run_local_server blocks on the redirect, so keep it off the event loop
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._run_flow)

    async def revoke(self, token: str) -> None:
        async with httpx.AsyncClient() as http:
            response = await http.post(
                REVOKE_URL,
                params={"token": token},
                headers={"content-type": "application/x-www-form-urlencoded"},
            )
        response.raise_for_status()
        logger.info("OAuth token revoked")
