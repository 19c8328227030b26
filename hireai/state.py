"""Application state handed to every view: store, navigation, notices, AI gateway."""
from __future__ import annotations

from typing import assert_never

from hireai.config import Settings, get_env, load_settings
from hireai.gateway import GenerationGateway
from hireai.llm import get_model
from hireai.log import get_logger
from hireai.models import Application, Job
from hireai.navigation import (
    ApplyView,
    DetailsView,
    DiscoverView,
    ListView,
    Navigator,
    PostView,
    ViewState,
)
from hireai.notifications import Notifier
from hireai.runner import LoopRunner
from hireai.store import FileSlot, JobStore

log = get_logger(__name__)


class AppState:
    def __init__(
        self,
        store: JobStore,
        gateway: GenerationGateway,
        navigator: Navigator | None = None,
        notifier: Notifier | None = None,
        settings: Settings | None = None,
        runner: LoopRunner | None = None,
    ) -> None:
        self.store = store
        self.gateway = gateway
        self.navigator = navigator or Navigator()
        self.notifier = notifier or Notifier()
        self.settings = settings or Settings()
        self.runner = runner or LoopRunner()

    @property
    def view(self) -> ViewState:
        return self.navigator.view

    def post_job(self, job: Job) -> None:
        self.store.prepend(job)
        self.navigator.submit()
        self.notifier.show("Job posted successfully!")

    def submit_application(self, application: Application) -> None:
        # Applications are not stored anywhere; the log is the only record.
        log.info(
            "Application received: job=%s name=%s email=%s resume=%s letter=%d chars",
            application.job_id,
            application.applicant_name,
            application.email,
            application.resume_link or "-",
            len(application.cover_letter),
        )
        self.notifier.show(f"Application submitted to {application.email}!")
        self.navigator.submit()

    def resolve_job(self, view: ViewState | None = None) -> Job | None:
        """The job a Details/Apply view points at; None when it has gone or the view has none."""
        view = self.view if view is None else view
        match view:
            case DetailsView(job_id=job_id) | ApplyView(job_id=job_id):
                return self.store.get(job_id)
            case ListView() | PostView() | DiscoverView():
                return None
            case _:
                assert_never(view)


def build_app_state(settings: Settings | None = None, env_getter=get_env) -> AppState:
    settings = settings or load_settings()
    store = JobStore(FileSlot(settings.data_dir), key=settings.storage_key)
    gateway = GenerationGateway(get_model(env_getter), search_region=settings.search_region)
    return AppState(
        store,
        gateway,
        notifier=Notifier(lifetime=settings.notification_seconds),
        settings=settings,
    )
