import logging
import os
from typing import Optional

import httpx
from pydantic import ValidationError

from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from config import GEMINI_MODEL
from models import ImageFile, ScorecardData, scorecard_from_json, scorecard_json_schema
from llm.exceptions import ExtractionServiceError, InvalidFormatError
from llm.prompts import build_extraction_prompt

logger = logging.getLogger(__name__)

# Longest slice of an unparseable response that goes into the log
_LOGGED_RESPONSE_CHARS = 500


# --- API Interaction ---

def _create_client() -> genai.Client:
    api_key = os.environ.get("GOOGLE_API_KEY") or os.environ.get("API_KEY")
    if not api_key:
        raise EnvironmentError(
            "GOOGLE_API_KEY environment variable is not set. "
            "Get an API key at https://aistudio.google.com/apikey"
        )
    return genai.Client(api_key=api_key)


def _image_part(image: ImageFile) -> types.Part:
    # The SDK base64-encodes inline bytes on the wire.
    return types.Part.from_bytes(data=image.data, mime_type=image.content_type)


async def _call_gemini(
    client: genai.Client,
    image_part: types.Part,
    prompt: str,
    model: str = GEMINI_MODEL,
) -> Optional[str]:
    """Send prompt + image with the scorecard schema, return the raw response text."""
    try:
        response = await client.aio.models.generate_content(
            model=model,
            contents=[image_part, prompt],
            config=types.GenerateContentConfig(
                response_mime_type="application/json",
                response_json_schema=scorecard_json_schema(),
            ),
        )
    except genai_errors.APIError as e:
        logger.warning("Gemini returned an error code=%s message=%s", e.code, e.message)
        raise ExtractionServiceError(
            e.message or f"The AI service returned an error ({e.code})."
        ) from e
    except httpx.HTTPError as e:
        logger.warning("Could not reach Gemini: %s", e)
        raise ExtractionServiceError(
            f"Could not reach the AI service: {e}" if str(e) else "Could not reach the AI service."
        ) from e
    return response.text


# --- Parsing ---

def parse_scorecard(text: Optional[str]) -> ScorecardData:
    """Parse the model's JSON text into ScorecardData, verbatim.

    No totals are recomputed. An empty list is a valid parse.

    Raises:
        InvalidFormatError: The text is empty, not JSON, or not the expected shape.
    """
    if text is None or not text.strip():
        logger.warning("Gemini returned an empty response")
        raise InvalidFormatError()
    try:
        return scorecard_from_json(text.strip())
    except ValidationError as e:
        logger.warning(
            "Failed to parse JSON response (%d errors): %s",
            e.error_count(),
            text[:_LOGGED_RESPONSE_CHARS],
        )
        raise InvalidFormatError() from e


# --- Public API ---

async def extract_scorecard(
    image: ImageFile,
    *,
    client: Optional[genai.Client] = None,
    model: str = GEMINI_MODEL,
    user_context: Optional[str] = None,
) -> ScorecardData:
    """Extract per-player scores from a scorecard image.

    One request, no retries, no timeout.

    Args:
        image: The selected image (bytes + image/* content type).
        client: Gemini client. Built from GOOGLE_API_KEY when omitted.
        model: Gemini model name.
        user_context: Optional free-text hint appended to the prompt, e.g.
            "The first row is the scorer, not a player".

    Returns:
        ScorecardData in the order the model returned it. May be empty.

    Raises:
        EnvironmentError: If no API key is configured and no client was given.
        ExtractionServiceError: On network or provider failure.
        InvalidFormatError: If the response is not a parseable scorecard.
    """
    client = client or _create_client()
    prompt = build_extraction_prompt(user_context)

    logger.info(
        "Extracting scorecard filename=%s content_type=%s bytes=%d model=%s",
        image.filename, image.content_type, image.size, model,
    )
    text = await _call_gemini(client, _image_part(image), prompt, model=model)
    data = parse_scorecard(text)
    logger.info("Extracted %d player(s) from %s", len(data), image.filename)
    return data


class GeminiScorecardExtractor:
    """Extraction client the controller talks to.

    Holds the model settings; the Gemini client is created lazily on first
    use so the app can start without an API key.
    """

    def __init__(
        self,
        client: Optional[genai.Client] = None,
        *,
        model: str = GEMINI_MODEL,
        user_context: Optional[str] = None,
    ):
        self._client = client
        self.model = model
        self.user_context = user_context

    async def extract(self, image: ImageFile) -> ScorecardData:
        if self._client is None:
            self._client = _create_client()
        return await extract_scorecard(
            image,
            client=self._client,
            model=self.model,
            user_context=self.user_context,
        )
