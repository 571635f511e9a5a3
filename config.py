"""Application settings.

Values come from the environment, with a local .env file loaded first.
"""

import os
from pathlib import Path
from typing import List

from dotenv import load_dotenv

load_dotenv()


# --- Gemini ---

GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")

# --- Google Sheets ---

SPREADSHEET_ID = os.environ.get(
    "SPREADSHEET_ID", "1sjDla83PB-8fq57Pbk2G2dnRgtcgYa4f8nTsoPoMY5s"
)
SHEET_RANGE = os.environ.get("SHEET_RANGE", "rawData!A1")
SHEETS_SCOPES: List[str] = ["https://www.googleapis.com/auth/spreadsheets"]

# OAuth client secret downloaded from Google Cloud Console ("Desktop app" type)
GOOGLE_CLIENT_SECRETS_FILE = Path(
    os.environ.get("GOOGLE_CLIENT_SECRETS_FILE", "credentials/client_secret.json")
)

# --- HTTP ---

CORS_ORIGINS: List[str] = [
    origin.strip()
    for origin in os.environ.get("CORS_ORIGINS", "http://localhost:5173").split(",")
    if origin.strip()
]

# --- Logging ---

LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
