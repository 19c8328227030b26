"""Groq via its OpenAI-compatible endpoint. JSON mode, no web grounding."""
from __future__ import annotations

import json
from typing import Any

from openai import AsyncOpenAI

from hireai.llm.base import LanguageModel
from hireai.log import get_logger
from hireai.models import ModelReply

log = get_logger(__name__)

GROQ_BASE_URL = "https://api.groq.com/openai/v1"


class GroqModel(LanguageModel):
    name = "groq"

    def __init__(
        self,
        api_key: str,
        model: str = "llama-3.3-70b-versatile",
        base_url: str = GROQ_BASE_URL,
    ) -> None:
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url)
        self.model = model

    async def generate(
        self,
        prompt: str,
        *,
        schema: dict[str, Any] | None = None,
        grounded: bool = False,
    ) -> ModelReply:
        extra: dict[str, Any] = {}
        if schema is not None:
            # Groq's JSON mode takes no schema, so it travels in the prompt.
            prompt = (
                f"{prompt}\n\nReturn ONLY a JSON object that follows this schema "
                f"(property types are upper-case OpenAPI types):\n{json.dumps(schema, indent=2)}"
            )
            extra["response_format"] = {"type": "json_object"}
        if grounded:
            log.info("Groq has no web search; answering from model knowledge only")

        r = await self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
            max_tokens=1200,
            **extra,
        )
        return ModelReply(text=(r.choices[0].message.content or "").strip())
