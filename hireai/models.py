"""Data models for job postings, applications and AI results."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class JobType(str, Enum):
    FULL_TIME = "Full-time"
    PART_TIME = "Part-time"
    CONTRACT = "Contract"
    REMOTE = "Remote"
    INTERNSHIP = "Internship"

    @classmethod
    def parse(cls, value: str | None, default: JobType | None = None) -> JobType:
        """Exact value match, then case-insensitive; ``default`` (Full-time) otherwise."""
        for jt in cls:
            if jt.value == value:
                return jt
        lowered = (value or "").strip().lower()
        for jt in cls:
            if jt.value.lower() == lowered:
                return jt
        return default or cls.FULL_TIME


@dataclass
class Job:
    id: str
    title: str
    company: str
    location: str
    type: JobType
    salary_range: str
    description: str
    posted_at: int
    requirements: list[str] = field(default_factory=list)
    apply_link: str = ""
    deadline: str = ""
    image_url: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Storage shape; keys match the browser app's localStorage records."""
        data: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "company": self.company,
            "location": self.location,
            "type": self.type.value,
            "salaryRange": self.salary_range,
            "description": self.description,
            "postedAt": self.posted_at,
            "requirements": list(self.requirements),
        }
        if self.apply_link:
            data["applyLink"] = self.apply_link
        if self.deadline:
            data["deadline"] = self.deadline
        if self.image_url:
            data["imageUrl"] = self.image_url
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Job:
        return cls(
            id=str(data["id"]),
            title=data.get("title", ""),
            company=data.get("company", ""),
            location=data.get("location", ""),
            type=JobType.parse(data.get("type")),
            salary_range=data.get("salaryRange", ""),
            description=data.get("description", ""),
            posted_at=int(data.get("postedAt", 0)),
            requirements=list(data.get("requirements") or []),
            apply_link=data.get("applyLink") or "",
            deadline=data.get("deadline") or "",
            image_url=data.get("imageUrl") or "",
        )


@dataclass
class Application:
    job_id: str
    applicant_name: str
    email: str
    cover_letter: str
    resume_link: str = ""


@dataclass(frozen=True)
class SearchSource:
    title: str
    uri: str


@dataclass
class SearchResult:
    summary: str
    sources: list[SearchSource] = field(default_factory=list)


@dataclass
class AutoFormatResult:
    title: str
    company: str
    location: str
    type: str
    salary: str
    description: str
    requirements: list[str]
    apply_link: str
    deadline: str
    image_url: str = ""


@dataclass
class ModelReply:
    """What a language-model client hands back: text plus any web citations."""

    text: str
    citations: list[dict[str, str | None]] = field(default_factory=list)
