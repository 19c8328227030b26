"""AI-assisted content: descriptions, cover letters, job import, web search.

Each operation is one fixed prompt and one request. Nothing is retried;
failures surface as GenerationError for the view to report.
"""
from __future__ import annotations

from typing import Any

from hireai.errors import GenerationError, HireAIError
from hireai.llm.base import LanguageModel
from hireai.log import get_logger
from hireai.models import AutoFormatResult, JobType, ModelReply, SearchResult
from hireai.normalizer import collect_sources, parse_job_response

log = get_logger(__name__)

DESCRIPTION_FALLBACK = "Failed to generate description."
COVER_LETTER_FALLBACK = "Failed to generate cover letter."
NO_RESULTS_SUMMARY = "No results found."

# ── Prompts ──────────────────────────────────────────────────────────────

_DESCRIPTION_PROMPT = """\
You are an expert HR specialist. Write a professional and engaging job description for the following position:

Job Title: {title}
Company: {company}
Key Details/Requirements: {key_details}

Structure the response with clear sections: "About the Role", "Key Responsibilities", and "Requirements".
Use professional tone, but keep it concise (under 300 words).
Do not use markdown formatting like **bold** or # headers, just use plain text with bullet points for readability.
"""

_COVER_LETTER_PROMPT = """\
Write a professional and persuasive cover letter for a job application.

Candidate Name: {candidate_name}
Applying for: {job_title} at {company}
Candidate Skills/Experience: {skills}

Keep it formal, enthusiastic, and concise (under 200 words).
"""

_AUTO_FORMAT_PROMPT = """\
You are an AI that cleans, rewrites, and formats job vacancies for my website.

Task:
- Rewrite the following raw job data uniquely.
- Extract clear fields.
- Remove duplicates.
- Keep details accurate.
- Infer missing fields (like 'type' or 'salary') if possible, otherwise use reasonable defaults (e.g., 'Full-time', 'Negotiable').
- IMPORTANT for 'deadline': Only extract a specific date (e.g., '2024-12-31' or 'December 31, 2024') if it is explicitly stated in the text. If no specific calendar date is found, return an empty string "". Do NOT return phrases like "As soon as possible", "Until filled", or "Check original advertisement".
- IMPORTANT for 'imageUrl': Scan the text for any valid image URLs (starting with http/https and often ending in .png, .jpg, .jpeg, .webp) that might represent a job poster, advertisement flyer, or company logo. Also look for markdown image links like ![alt](url). If found, populate this field.

Raw Data:
{raw_text}
"""

_SEARCH_PROMPT = """\
Find the latest active job vacancies for: {query}.
Focus on government and private sector jobs in {region} unless specified otherwise.
Provide a concise summary of the top 5 opportunities found, including their titles and locations.
"""

_STRING: dict[str, Any] = {"type": "STRING"}
_STRING_LIST: dict[str, Any] = {"type": "ARRAY", "items": _STRING}

JOB_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "title": _STRING,
        "company": _STRING,
        "location": _STRING,
        "type": {"type": "STRING", "enum": [jt.value for jt in JobType]},
        "salary": _STRING,
        "summary": {"type": "STRING", "description": "A rewritten unique summary of the role"},
        "responsibilities": _STRING_LIST,
        "requirements": _STRING_LIST,
        "experience": _STRING,
        "education": _STRING,
        "category": _STRING,
        "deadline": {
            "type": "STRING",
            "description": "The specific deadline date (YYYY-MM-DD) if found, otherwise empty string.",
        },
        "applyLink": {"type": "STRING", "description": "The original URL or email to apply"},
        "imageUrl": {
            "type": "STRING",
            "description": "Direct URL of an image found in the text (e.g., ending in .jpg, .png) "
                           "or extracted from markdown image syntax.",
        },
    },
    "required": [
        "title", "company", "location", "type", "salary",
        "summary", "responsibilities", "requirements", "applyLink",
    ],
}


class GenerationGateway:
    """Stateless front for the language model; inject a fake model in tests."""

    def __init__(self, model: LanguageModel, *, search_region: str = "Pakistan") -> None:
        self.model = model
        self.search_region = search_region

    async def _ask(
        self,
        prompt: str,
        failure: str,
        *,
        schema: dict[str, Any] | None = None,
        grounded: bool = False,
    ) -> ModelReply:
        try:
            return await self.model.generate(prompt, schema=schema, grounded=grounded)
        except HireAIError:
            raise
        except Exception as exc:
            log.error("%s request failed: %s", self.model.name, exc)
            raise GenerationError(failure) from exc

    async def generate_description(self, title: str, company: str, key_details: str) -> str:
        prompt = _DESCRIPTION_PROMPT.format(title=title, company=company, key_details=key_details)
        reply = await self._ask(prompt, "Could not generate job description. Please try again.")
        if not reply.text:
            log.warning("Empty description reply for %s @ %s", title, company)
            return DESCRIPTION_FALLBACK
        log.info("Description generated for %s @ %s", title, company)
        return reply.text

    async def generate_cover_letter(
        self, job_title: str, company: str, candidate_name: str, skills: str
    ) -> str:
        prompt = _COVER_LETTER_PROMPT.format(
            job_title=job_title,
            company=company,
            candidate_name=candidate_name,
            skills=skills,
        )
        reply = await self._ask(prompt, "Could not generate cover letter. Please try again.")
        if not reply.text:
            log.warning("Empty cover letter reply for %s @ %s", job_title, company)
            return COVER_LETTER_FALLBACK
        log.info("Cover letter generated for %s @ %s", job_title, company)
        return reply.text

    async def auto_format_job(self, raw_text: str) -> AutoFormatResult:
        reply = await self._ask(
            _AUTO_FORMAT_PROMPT.format(raw_text=raw_text),
            "Could not process job data. Please check the content and try again.",
            schema=JOB_SCHEMA,
        )
        try:
            result = parse_job_response(reply.text)
        except HireAIError as exc:
            log.error("Auto-format reply was not valid JSON: %s | raw=%r", exc, reply.text[:2000])
            raise
        log.info("Imported job: %s @ %s", result.title or "?", result.company or "?")
        return result

    async def search_jobs(self, query: str) -> SearchResult:
        reply = await self._ask(
            _SEARCH_PROMPT.format(query=query, region=self.search_region),
            "Could not search for jobs. Please try again later.",
            grounded=True,
        )
        sources = collect_sources(reply.citations)
        log.info("Search %r: %d source(s)", query, len(sources))
        return SearchResult(summary=reply.text or NO_RESULTS_SUMMARY, sources=sources)
