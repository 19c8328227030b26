"""Which screen is showing, and the moves between screens.

A view is one of five frozen dataclasses. Consumers match on them with
``assert_never`` in the fallthrough so a new variant cannot be forgotten.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from hireai.log import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class ListView:
    pass


@dataclass(frozen=True)
class DetailsView:
    job_id: str


@dataclass(frozen=True)
class PostView:
    pass


@dataclass(frozen=True)
class ApplyView:
    job_id: str


@dataclass(frozen=True)
class DiscoverView:
    pass


ViewState = Union[ListView, DetailsView, PostView, ApplyView, DiscoverView]


class Navigator:
    """Holds the current view. Events with no edge from it are ignored."""

    def __init__(self, view: ViewState | None = None) -> None:
        self.view: ViewState = view or ListView()

    def _go(self, event: str, target: ViewState) -> ViewState:
        log.debug("%s: %s -> %s", event, self.view, target)
        self.view = target
        return target

    def _ignored(self, event: str) -> ViewState:
        log.warning("Ignoring %r from %s", event, self.view)
        return self.view

    def select(self, job_id: str) -> ViewState:
        if isinstance(self.view, ListView):
            return self._go("select", DetailsView(job_id))
        return self._ignored("select")

    def new_job(self) -> ViewState:
        return self._go("new_job", PostView())

    def discover(self) -> ViewState:
        return self._go("discover", DiscoverView())

    def home(self) -> ViewState:
        return self._go("home", ListView())

    def apply(self) -> ViewState:
        if isinstance(self.view, DetailsView):
            return self._go("apply", ApplyView(self.view.job_id))
        return self._ignored("apply")

    def back(self) -> ViewState:
        if isinstance(self.view, DetailsView):
            return self._go("back", ListView())
        return self._ignored("back")

    def submit(self) -> ViewState:
        if isinstance(self.view, (ApplyView, PostView)):
            return self._go("submit", ListView())
        return self._ignored("submit")

    def cancel(self) -> ViewState:
        match self.view:
            case ApplyView(job_id=job_id):
                return self._go("cancel", DetailsView(job_id))
            case PostView():
                return self._go("cancel", ListView())
            case _:
                return self._ignored("cancel")
