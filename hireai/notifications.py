"""Single-slot, self-expiring user notice."""
from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Literal

NoticeKind = Literal["success", "info"]

NOTICE_SECONDS = 3.0


@dataclass(frozen=True)
class Notification:
    message: str
    kind: NoticeKind
    expires_at: float


class Notifier:
    """Newest notice replaces the old one; it disappears ``lifetime`` seconds after ``show``."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        lifetime: float = NOTICE_SECONDS,
    ) -> None:
        self.clock = clock
        self.lifetime = lifetime
        self._notice: Notification | None = None

    def show(self, message: str, kind: NoticeKind = "success") -> Notification:
        self._notice = Notification(message, kind, self.clock() + self.lifetime)
        return self._notice

    def current(self) -> Notification | None:
        if self._notice is not None and self.clock() >= self._notice.expires_at:
            self._notice = None
        return self._notice
