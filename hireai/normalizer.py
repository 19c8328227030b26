"""Turn raw language-model output into job-board shapes.

Everything here is pure: no network, no storage, no clock.
"""
from __future__ import annotations

import json
import re
from typing import Any, Iterable, Mapping

from hireai.errors import FormatParseError
from hireai.log import get_logger
from hireai.models import AutoFormatResult, SearchSource

log = get_logger(__name__)

DEFAULT_SOURCE_TITLE = "Job Source"
PLACEHOLDER_URI = "#"

_MONTH = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_CALENDAR_DATE_RE = re.compile(
    r"\b\d{4}-\d{1,2}-\d{1,2}\b"
    r"|\b\d{1,2}[/.\-]\d{1,2}[/.\-]\d{2,4}\b"
    rf"|\b{_MONTH}\.?\s+\d{{1,2}}(?:st|nd|rd|th)?(?:,?\s+\d{{4}})?\b"
    rf"|\b\d{{1,2}}(?:st|nd|rd|th)?\s+(?:of\s+)?{_MONTH}\b\.?(?:,?\s+\d{{4}})?",
    re.IGNORECASE,
)


def normalize_deadline(value: Any) -> str:
    """The calendar date named in a deadline, without any relative wording around it.

    "ASAP" and friends become "".
    """
    text = _text(value)
    if not text:
        return ""
    match = _CALENDAR_DATE_RE.search(text)
    if match is None:
        log.debug("Dropping non-date deadline %r", text)
        return ""
    if match.group(0) != text:
        log.debug("Trimmed deadline %r to %r", text, match.group(0))
    return match.group(0)


def format_description(data: Mapping[str, Any]) -> str:
    responsibilities = "\n".join(f"- {r}" for r in _string_list(data.get("responsibilities")))
    return (
        f"Summary:\n{_text(data.get('summary'))}\n\n"
        f"Responsibilities:\n{responsibilities}\n\n"
        f"Experience: {_text(data.get('experience')) or 'Not specified'}\n"
        f"Education: {_text(data.get('education')) or 'Not specified'}\n"
        f"Category: {_text(data.get('category')) or 'General'}\n"
    )


def parse_job_response(json_text: str | None) -> AutoFormatResult:
    """Parse the structured auto-format reply.

    An empty reply is read as ``{}``. Anything that is not a JSON object
    raises FormatParseError carrying the raw payload; no partial recovery
    is attempted.
    """
    raw = json_text or "{}"
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise FormatParseError("The AI returned data we could not read.", raw=raw) from exc
    if not isinstance(data, dict):
        raise FormatParseError("The AI returned data in an unexpected shape.", raw=raw)

    return AutoFormatResult(
        title=_text(data.get("title")),
        company=_text(data.get("company")),
        location=_text(data.get("location")),
        type=_text(data.get("type")),
        salary=_text(data.get("salary")),
        description=format_description(data),
        requirements=_string_list(data.get("requirements")),
        apply_link=_text(data.get("applyLink")),
        deadline=normalize_deadline(data.get("deadline")),
        image_url=_text(data.get("imageUrl")),
    )


def collect_sources(citations: Iterable[Mapping[str, Any]]) -> list[SearchSource]:
    """Map citations to sources, drop ones without a URI, dedupe by URI (first wins)."""
    seen: set[str] = set()
    sources: list[SearchSource] = []
    for item in citations:
        uri = _text(item.get("uri"))
        if not uri or uri == PLACEHOLDER_URI or uri in seen:
            continue
        seen.add(uri)
        sources.append(SearchSource(title=_text(item.get("title")) or DEFAULT_SOURCE_TITLE, uri=uri))
    return sources


def _text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


def _string_list(value: Any) -> list[str]:
    if not value:
        return []
    if isinstance(value, str):
        value = [value]
    return [s for s in (_text(v) for v in value) if s]
