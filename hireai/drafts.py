"""Form state for the Post and Apply screens, before anything is saved."""
from __future__ import annotations

import random
import string
import time
from dataclasses import dataclass
from typing import Literal

from hireai.errors import ValidationError
from hireai.models import Application, AutoFormatResult, Job, JobType

DEFAULT_KEY_DETAILS = "Standard industry requirements"

_ID_ALPHABET = string.ascii_lowercase + string.digits


def new_job_id() -> str:
    return "".join(random.choices(_ID_ALPHABET, k=9))


def split_requirements(text: str) -> list[str]:
    return [r.strip() for r in text.split(",") if r.strip()]


@dataclass
class PostDraft:
    title: str = ""
    company: str = ""
    location: str = ""
    type: JobType = JobType.FULL_TIME
    salary_range: str = ""
    description: str = ""
    requirements: str = ""
    apply_link: str = ""
    deadline: str = ""
    image_url: str = ""
    mode: Literal["manual", "import"] = "manual"
    raw_text: str = ""
    busy: bool = False
    error: str | None = None

    def check_can_generate(self) -> None:
        if not self.title.strip() or not self.company.strip():
            raise ValidationError("Please enter a job title and company first.")

    def key_details(self) -> str:
        return self.requirements.strip() or DEFAULT_KEY_DETAILS

    def check_can_import(self) -> None:
        if not self.raw_text.strip():
            raise ValidationError("Please paste some job text to process.")

    def check_complete(self) -> None:
        missing = [
            label for label, value in (
                ("title", self.title), ("company", self.company),
                ("location", self.location), ("description", self.description),
            )
            if not value.strip()
        ]
        if missing:
            raise ValidationError(f"Please fill in: {', '.join(missing)}.")

    def merge(self, result: AutoFormatResult) -> None:
        """Take every non-empty imported field, then switch to the form for review."""
        self.title = result.title or self.title
        self.company = result.company or self.company
        self.location = result.location or self.location
        self.type = JobType.parse(result.type, default=self.type) if result.type else self.type
        self.salary_range = result.salary or self.salary_range
        self.description = result.description
        self.requirements = ", ".join(result.requirements)
        self.apply_link = result.apply_link or self.apply_link
        self.deadline = result.deadline or self.deadline
        self.image_url = result.image_url or self.image_url
        self.mode = "manual"

    def to_job(self, now_ms: int | None = None, job_id: str | None = None) -> Job:
        return Job(
            id=job_id or new_job_id(),
            title=self.title.strip(),
            company=self.company.strip(),
            location=self.location.strip(),
            type=self.type,
            salary_range=self.salary_range.strip(),
            description=self.description,
            posted_at=int(time.time() * 1000) if now_ms is None else now_ms,
            requirements=split_requirements(self.requirements),
            apply_link=self.apply_link.strip(),
            deadline=self.deadline.strip(),
            image_url=self.image_url.strip(),
        )


@dataclass
class ApplicationDraft:
    name: str = ""
    email: str = ""
    skills: str = ""
    cover_letter: str = ""
    resume_link: str = ""
    busy: bool = False
    error: str | None = None

    def check_can_generate(self) -> None:
        if not self.name.strip() or not self.skills.strip():
            raise ValidationError("Please fill in your name and skills first.")

    def check_complete(self) -> None:
        if not self.name.strip() or not self.email.strip() or not self.cover_letter.strip():
            raise ValidationError("Name, email and a cover letter are required.")

    def to_application(self, job_id: str) -> Application:
        return Application(
            job_id=job_id,
            applicant_name=self.name.strip(),
            email=self.email.strip(),
            cover_letter=self.cover_letter,
            resume_link=self.resume_link.strip(),
        )
