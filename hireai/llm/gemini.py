"""Google Gemini client (google-genai); the only provider with web grounding."""
from __future__ import annotations

from typing import Any

from google import genai
from google.genai import types

from hireai.llm.base import LanguageModel
from hireai.log import get_logger
from hireai.models import ModelReply

log = get_logger(__name__)


def _citations(response: Any) -> list[dict[str, str | None]]:
    """Web chunks from the first candidate's grounding metadata, in order."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    metadata = getattr(candidates[0], "grounding_metadata", None)
    chunks = getattr(metadata, "grounding_chunks", None) or []
    citations: list[dict[str, str | None]] = []
    for chunk in chunks:
        web = getattr(chunk, "web", None)
        citations.append({
            "title": getattr(web, "title", None),
            "uri": getattr(web, "uri", None),
        })
    return citations


class GeminiModel(LanguageModel):
    name = "gemini"

    def __init__(self, api_key: str, model: str = "gemini-2.5-flash") -> None:
        self.client = genai.Client(api_key=api_key)
        self.model = model

    async def generate(
        self,
        prompt: str,
        *,
        schema: dict[str, Any] | None = None,
        grounded: bool = False,
    ) -> ModelReply:
        config = None
        if schema is not None or grounded:
            config = types.GenerateContentConfig(
                response_mime_type="application/json" if schema is not None else None,
                response_schema=schema,
                tools=[types.Tool(google_search=types.GoogleSearch())] if grounded else None,
            )
        response = await self.client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=config,
        )
        citations = _citations(response) if grounded else []
        log.debug("Gemini replied (%d citations)", len(citations))
        return ModelReply(text=response.text or "", citations=citations)
