"""Job postings, kept in order and mirrored to a key-value slot."""
from __future__ import annotations

import fcntl
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable

from hireai.log import get_logger
from hireai.models import Job, JobType
from hireai.seed import seed_jobs

log = get_logger(__name__)

ALL_TYPES = "All"


class KeyValueSlot(ABC):
    @abstractmethod
    def get(self, key: str) -> str | None:
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        pass


class MemorySlot(KeyValueSlot):
    def __init__(self, values: dict[str, str] | None = None) -> None:
        self.values: dict[str, str] = dict(values or {})

    def get(self, key: str) -> str | None:
        return self.values.get(key)

    def set(self, key: str, value: str) -> None:
        self.values[key] = value


def _lock(f, exclusive: bool = True) -> None:
    """Advisory file lock (Unix fcntl)."""
    try:
        op = fcntl.LOCK_EX if exclusive else fcntl.LOCK_SH
        fcntl.flock(f.fileno(), op)
    except (OSError, AttributeError):
        pass


def _unlock(f) -> None:
    try:
        fcntl.flock(f.fileno(), fcntl.LOCK_UN)
    except (OSError, AttributeError):
        pass


class FileSlot(KeyValueSlot):
    """One ``<key>.json`` file per key inside ``directory``."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def _path(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            _lock(f, exclusive=False)
            value = f.read()
            _unlock(f)
        return value

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with open(self._path(key), "a+", encoding="utf-8") as f:
            _lock(f)
            f.seek(0)
            f.truncate()
            f.write(value)
            f.flush()
            _unlock(f)


class JobStore:
    """Single owner of the job list. Loaded once; written after every change."""

    def __init__(
        self,
        slot: KeyValueSlot,
        key: str = "hireai_jobs",
        seed: Callable[[], list[Job]] = seed_jobs,
    ) -> None:
        self.slot = slot
        self.key = key

        saved = slot.get(key)
        if saved is None:
            self._jobs = seed()
            self._save()
            log.info("No saved jobs under %r; seeded %d sample job(s)", key, len(self._jobs))
            return
        try:
            self._jobs = [Job.from_dict(d) for d in json.loads(saved)]
        except (ValueError, KeyError, TypeError, AttributeError) as exc:
            # Left on disk untouched until the next write replaces it.
            log.error("Saved jobs under %r are unreadable (%s); using the sample jobs", key, exc)
            self._jobs = seed()
            return
        log.info("Loaded %d job(s) from %r", len(self._jobs), key)

    def _save(self) -> None:
        self.slot.set(self.key, json.dumps([j.to_dict() for j in self._jobs], ensure_ascii=False))

    @property
    def jobs(self) -> list[Job]:
        return list(self._jobs)

    def __len__(self) -> int:
        return len(self._jobs)

    def get(self, job_id: str) -> Job | None:
        for job in self._jobs:
            if job.id == job_id:
                return job
        return None

    def prepend(self, job: Job) -> None:
        if self.get(job.id) is not None:
            raise ValueError(f"Duplicate job id: {job.id}")
        self._jobs.insert(0, job)
        self._save()
        log.info("Posted: %s @ %s [%s]", job.title, job.company, job.id)


def filter_jobs(jobs: list[Job], term: str = "", job_type: str = ALL_TYPES) -> list[Job]:
    """Title/company substring search plus an optional exact type filter."""
    needle = term.strip().lower()
    wanted = None if job_type == ALL_TYPES else JobType.parse(job_type)
    return [
        j for j in jobs
        if (needle in j.title.lower() or needle in j.company.lower())
        and (wanted is None or j.type is wanted)
    ]
