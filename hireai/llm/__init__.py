from .base import LanguageModel
from .gemini import GeminiModel
from .groq import GroqModel
from .unconfigured import UnconfiguredModel

from hireai.log import get_logger

log = get_logger(__name__)

__all__ = [
    "LanguageModel", "GeminiModel", "GroqModel", "UnconfiguredModel",
    "get_model",
]


def get_model(env_getter) -> LanguageModel:
    provider = env_getter("LLM_PROVIDER").lower()
    gemini_key = env_getter("GEMINI_API_KEY") or env_getter("GOOGLE_API_KEY")
    groq_key = env_getter("GROQ_API_KEY")

    if gemini_key and provider in ("", "gemini"):
        model = env_getter("GEMINI_MODEL", "gemini-2.5-flash")
        log.info("Using language model: Gemini (%s)", model)
        return GeminiModel(gemini_key, model=model)

    if groq_key and provider in ("", "groq"):
        model = env_getter("GROQ_LLM_MODEL", "llama-3.3-70b-versatile")
        log.info("Using language model: Groq (%s)", model)
        return GroqModel(groq_key, model=model)

    if provider:
        log.warning("LLM_PROVIDER=%s but no matching API key is set", provider)
    log.info("No language model API key found; AI features are disabled")
    return UnconfiguredModel()
