"""Stand-in used when no API key is configured; every call fails cleanly."""
from __future__ import annotations

from typing import Any

from hireai.errors import GenerationError
from hireai.llm.base import LanguageModel
from hireai.models import ModelReply


class UnconfiguredModel(LanguageModel):
    name = "unconfigured"

    async def generate(
        self,
        prompt: str,
        *,
        schema: dict[str, Any] | None = None,
        grounded: bool = False,
    ) -> ModelReply:
        raise GenerationError(
            "No language model is configured. Set GEMINI_API_KEY or GROQ_API_KEY in .env."
        )
