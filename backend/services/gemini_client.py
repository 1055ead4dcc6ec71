"""Google Gemini API wrapper with error handling."""

import json
import logging
import re

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

_client: genai.Client | None = None

_JSON_OBJECT_RE = re.compile(r"\{[\s\S]*\}")


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - AI job intake disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def parse_json_response(text: str):
    """Parse model output, tolerating code fences and surrounding prose.

    Returns whatever JSON value the text holds; callers check its shape.
    """
    text = text.strip()
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        match = _JSON_OBJECT_RE.search(text)
        if match is None:
            raise
        return json.loads(match.group(0))


async def generate_json(prompt: str, system_instruction: str | None = None) -> dict | None:
    """Send a prompt to Gemini and parse the JSON response."""
    client = get_client()
    if client is None:
        return None

    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=system_instruction,
                temperature=0.7,
                max_output_tokens=1500,
            ),
        )
        result = parse_json_response(response.text or "")
        if not isinstance(result, dict):
            logger.error("Gemini returned JSON %s, expected an object", type(result).__name__)
            return None
        return result

    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return None
    except Exception as e:
        logger.error("Gemini API error: %s", e)
        return None
