from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from hireai.models import ModelReply


class LanguageModel(ABC):
    name: str = "model"

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        schema: dict[str, Any] | None = None,
        grounded: bool = False,
    ) -> ModelReply:
        """One request, one reply. ``schema`` asks for JSON; ``grounded`` for live web search."""
