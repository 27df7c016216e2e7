"""Gemini-generated challenge items with a static fallback list."""

import json
import logging
from typing import Any, Dict, List, Optional

from .challenge_content import fallback_news_items
from .config import DEFAULT_MODEL
from .errors import ContentConfigurationError
from .models import ChallengeItem

logger = logging.getLogger(__name__)

# Items requested from the service and the minimum every fetch must return
REQUESTED_ITEMS = 6
MIN_ITEMS = 6

ITEM_FIELDS = ("headline", "body", "source", "isTrue", "explanation", "clues")


def _get_gemini_client(api_key: Optional[str]):
    """
    Create a Gemini client for the given key.
    Returns None if no key or the SDK cannot create a client.
    """
    if not api_key:
        return None
    try:
        from google import genai
        return genai.Client(api_key=api_key)
    except Exception as exc:
        logger.warning("Could not create Gemini client: %s", exc)
        return None


def _build_prompt(count: int) -> str:
    """Build the content-generation prompt."""
    return (
        f"Skapa {count} källkritiska utmaningar för svenska ungdomar (13-19 år).\n"
        "Innehållet ska röra sociala medier, AI-trender eller aktuella samhällsfrågor.\n"
        "Blanda fejkade influencer-nyheter, AI-genererade debattartiklar och sanna men "
        "otroliga vetenskapsnyheter. Sätt isTrue till true endast för sanna nyheter "
        "skrivna av människor.\n"
        "Inkludera 'clues' som kan upptäckas vid närmare granskning."
    )


def _build_config():
    """Generation config asking for a JSON array matching the item schema."""
    from google.genai import types

    item_schema = types.Schema(
        type=types.Type.OBJECT,
        properties={
            "headline": types.Schema(type=types.Type.STRING),
            "body": types.Schema(type=types.Type.STRING),
            "source": types.Schema(type=types.Type.STRING),
            "isTrue": types.Schema(type=types.Type.BOOLEAN),
            "explanation": types.Schema(type=types.Type.STRING),
            "clues": types.Schema(
                type=types.Type.ARRAY,
                items=types.Schema(type=types.Type.STRING),
            ),
        },
        required=list(ITEM_FIELDS),
    )
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=types.Schema(type=types.Type.ARRAY, items=item_schema),
    )


def parse_items(text: str) -> List[ChallengeItem]:
    """
    Parse the service's JSON text into items.
    Raises ValueError if the text is not a JSON array; malformed entries are skipped.
    """
    data = json.loads(text or "[]")
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array of items, got {type(data).__name__}")
    items: List[ChallengeItem] = []
    for i, entry in enumerate(data):
        try:
            items.append(ChallengeItem.from_dict(entry))
        except ValueError as exc:
            logger.warning("Skipping generated item %d: %s", i, exc)
    return items


def pad_items(
    items: List[ChallengeItem],
    fallback: List[ChallengeItem],
    minimum: int = MIN_ITEMS,
) -> List[ChallengeItem]:
    """Fill the slots `items` leaves empty (up to `minimum`) with the fallback item at the same position."""
    if len(items) >= minimum:
        return list(items)
    return list(items) + list(fallback[len(items):minimum])


def load_fallback(raw: List[Dict[str, Any]], minimum: int = MIN_ITEMS) -> List[ChallengeItem]:
    """Validate the static fallback list. Any problem here is a configuration error."""
    try:
        items = [ChallengeItem.from_dict(entry) for entry in raw]
    except ValueError as exc:
        raise ContentConfigurationError(f"Malformed fallback item: {exc}") from exc
    if len(items) < minimum:
        raise ContentConfigurationError(
            f"Fallback content has {len(items)} items, at least {minimum} are required"
        )
    return items


class ContentProvider:
    """
    Fetch challenge items from Gemini, once per call, without retries.

    `fetch()` never raises: any failure or short answer is covered by the
    fallback list so at least `min_items` items are always returned.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        *,
        client: Any = None,
        fallback: Optional[List[Dict[str, Any]]] = None,
        min_items: int = MIN_ITEMS,
    ):
        self.api_key = api_key or ""
        self.model = model
        self.min_items = min_items
        self._client = client
        self._fallback = load_fallback(
            fallback if fallback is not None else fallback_news_items(), min_items
        )

    @property
    def fallback_items(self) -> List[ChallengeItem]:
        return list(self._fallback)

    def _ensure_client(self) -> bool:
        """Lazily initialize the Gemini client. Returns True if ready."""
        if self._client is not None:
            return True
        self._client = _get_gemini_client(self.api_key)
        return self._client is not None

    def fetch(self) -> List[ChallengeItem]:
        if not self._ensure_client():
            logger.info("Gemini API key not configured; using fallback content")
            return self.fallback_items

        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=_build_prompt(REQUESTED_ITEMS),
                config=_build_config(),
            )
            items = parse_items(response.text or "")
        except Exception as exc:
            logger.warning("Content fetch failed, using fallback content: %s", exc)
            return self.fallback_items

        if len(items) < self.min_items:
            logger.warning(
                "Content service returned %d usable items, padding to %d from fallback",
                len(items),
                self.min_items,
            )
        else:
            logger.info("Fetched %d challenge items from %s", len(items), self.model)
        return pad_items(items, self._fallback, self.min_items)
