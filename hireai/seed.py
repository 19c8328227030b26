"""Sample postings shown until the first job is saved."""
from __future__ import annotations

import time

from hireai.models import Job, JobType

_DAY_MS = 86_400_000


def seed_jobs(now_ms: int | None = None) -> list[Job]:
    now_ms = int(time.time() * 1000) if now_ms is None else now_ms
    return [
        Job(
            id="1",
            title="Senior Frontend Engineer",
            company="TechFlow",
            location="Remote",
            type=JobType.FULL_TIME,
            salary_range="$140k - $180k",
            posted_at=now_ms - _DAY_MS * 2,
            requirements=["React", "TypeScript", "Tailwind", "5+ years exp"],
            description=(
                "We are looking for a Senior Frontend Engineer to lead our core product team. "
                "You will be responsible for architecting scalable UI components and mentoring "
                "junior developers.\n\n"
                "Key Responsibilities:\n"
                "- Build pixel-perfect UIs using React and Tailwind.\n"
                "- Optimize application performance.\n"
                "- Collaborate with product and design teams."
            ),
        ),
        Job(
            id="2",
            title="Product Designer",
            company="Creative Inc",
            location="New York, NY",
            type=JobType.FULL_TIME,
            salary_range="$110k - $150k",
            posted_at=now_ms - _DAY_MS,
            requirements=["Figma", "UX Research", "Prototyping"],
            description=(
                "Join our award-winning design team. We need someone with a keen eye for "
                "detail and a passion for user-centric design."
            ),
        ),
    ]
