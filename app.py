"""Streamlit UI for the HireAI job board."""
from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Coroutine, TypeVar, assert_never

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from hireai.config import ensure_dirs, load_settings
from hireai.drafts import ApplicationDraft, PostDraft
from hireai.errors import HireAIError, ValidationError
from hireai.llm import UnconfiguredModel
from hireai.log import get_logger
from hireai.models import Job, JobType
from hireai.navigation import ApplyView, DetailsView, DiscoverView, ListView, PostView
from hireai.state import AppState, build_app_state
from hireai.store import ALL_TYPES, filter_jobs

log = get_logger(__name__)

T = TypeVar("T")

_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #eef2ff 0%, #f8fafc 60%, #ecfeff 100%);
}
[data-testid="stSidebar"] {
    background: rgba(255,255,255,0.6);
    backdrop-filter: blur(16px);
    border-right: 1px solid rgba(255,255,255,0.3);
}
.block-container {
    padding-top: 2rem;
}
.stButton > button[kind="primary"] {
    border-radius: 8px;
    font-weight: 600;
}
h1, h2, h3 {
    color: #1e1b4b;
}
/* job type badge */
.job-badge {
    display: inline-block; padding: 0.1rem 0.6rem;
    background: #e0e7ff; color: #3730a3;
    border-radius: 999px; font-size: 0.8rem; font-weight: 600;
}
.job-meta {
    color: #64748b; font-size: 0.9rem;
}
</style>
"""

# ── Helpers ──────────────────────────────────────────────────────────────


def _state() -> AppState:
    if "app" not in st.session_state:
        settings = load_settings()
        ensure_dirs(settings)
        st.session_state["app"] = build_app_state(settings)
    return st.session_state["app"]


def _run(coro: Coroutine[Any, Any, T]) -> T:
    # One loop per session; the SDK clients keep connections bound to it.
    return _state().runner.run(coro)


def _posted(job: Job) -> str:
    return datetime.fromtimestamp(job.posted_at / 1000).strftime("%b %d, %Y")


def _go(move) -> None:
    move()
    st.rerun()


def _post_draft() -> PostDraft:
    return st.session_state.setdefault("post_draft", PostDraft())


def _apply_draft(job_id: str) -> ApplicationDraft:
    drafts: dict[str, ApplicationDraft] = st.session_state.setdefault("apply_drafts", {})
    return drafts.setdefault(job_id, ApplicationDraft())


def _not_found() -> None:
    st.warning("Job not found")
    if st.button("Back to Jobs"):
        _go(_state().navigator.home)


# ── View: Job list ───────────────────────────────────────────────────────


def view_list(state: AppState) -> None:
    st.header("Local Jobs")

    c1, c2 = st.columns([2, 3])
    with c1:
        term = st.text_input("Search", placeholder="Search titles or companies...")
    with c2:
        job_type = st.radio(
            "Type",
            [ALL_TYPES, *(jt.value for jt in JobType)],
            horizontal=True,
        )

    jobs = filter_jobs(state.store.jobs, term, job_type)
    if not jobs:
        st.info("No jobs found matching your criteria.")
        return

    cols = st.columns(2)
    for i, job in enumerate(jobs):
        with cols[i % 2]:
            with st.container(border=True):
                st.subheader(job.title)
                st.markdown(
                    f'**{job.company}** &nbsp; <span class="job-badge">{job.type.value}</span>',
                    unsafe_allow_html=True,
                )
                st.markdown(
                    f'<div class="job-meta">{job.location} · {job.salary_range or "Salary not listed"}'
                    f" · Posted {_posted(job)}</div>",
                    unsafe_allow_html=True,
                )
                if st.button("View details", key=f"select_{job.id}", use_container_width=True):
                    _go(lambda job_id=job.id: state.navigator.select(job_id))


# ── View: Job details ────────────────────────────────────────────────────


def view_details(state: AppState, job: Job) -> None:
    if st.button("← Back to Jobs"):
        _go(state.navigator.back)

    if job.image_url:
        st.image(job.image_url, caption=f"{job.title} Poster")

    st.header(job.title)
    st.markdown(
        f'**{job.company}** &nbsp; <span class="job-badge">{job.type.value}</span>',
        unsafe_allow_html=True,
    )
    c1, c2, c3 = st.columns(3)
    c1.metric("Location", job.location or "—")
    c2.metric("Salary", job.salary_range or "—")
    c3.metric("Posted", _posted(job))
    if job.deadline.strip():
        st.caption(f"Apply before: **{job.deadline}**")

    if job.apply_link:
        st.link_button("Apply Now ↗", job.apply_link, type="primary", use_container_width=True)
    elif st.button("Apply Now", type="primary", use_container_width=True):
        _go(state.navigator.apply)

    st.divider()
    st.subheader("About the Role")
    st.text(job.description)

    if job.requirements:
        st.subheader("Requirements")
        st.markdown("\n".join(f"- {r}" for r in job.requirements))

    if not job.apply_link:
        st.divider()
        with st.container(border=True):
            st.markdown("**Ready to apply?**")
            st.caption("Use our AI assistant to write a perfect cover letter in seconds.")
            if st.button("Start Application", key="start_application"):
                _go(state.navigator.apply)


# ── View: Post a job ─────────────────────────────────────────────────────


def view_post(state: AppState) -> None:
    st.header("Post a Job")
    draft = _post_draft()

    mode = st.radio(
        "Mode",
        ["manual", "import"],
        index=0 if draft.mode == "manual" else 1,
        format_func=lambda m: "Manual Entry" if m == "manual" else "AI Auto-Import",
        horizontal=True,
        label_visibility="collapsed",
    )
    draft.mode = mode

    if draft.mode == "import":
        _post_import(state, draft)
    else:
        _post_form(state, draft)


def _post_import(state: AppState, draft: PostDraft) -> None:
    draft.raw_text = st.text_area(
        "Raw job text",
        value=draft.raw_text,
        height=260,
        placeholder="Paste raw text here (e.g., from an email, WhatsApp, or another site)...",
    )
    if draft.error:
        st.error(draft.error)

    label = "Processing..." if draft.busy else "Auto-Format with AI"
    if st.button(label, type="primary", disabled=draft.busy, use_container_width=True):
        try:
            draft.check_can_import()
        except ValidationError as exc:
            draft.error = str(exc)
        else:
            draft.busy, draft.error = True, None
        st.rerun()

    if draft.busy:
        with st.spinner("Cleaning up the job post…"):
            try:
                draft.merge(_run(state.gateway.auto_format_job(draft.raw_text)))
            except HireAIError as exc:
                log.warning("Auto-format failed: %s", exc)
                draft.error = "Failed to process. Ensure the text contains valid job details."
            finally:
                draft.busy = False
        st.rerun()


def _post_form(state: AppState, draft: PostDraft) -> None:
    c1, c2 = st.columns(2)
    with c1:
        draft.title = st.text_input("Job title *", value=draft.title, placeholder="e.g. Senior Product Designer")
        draft.location = st.text_input("Location *", value=draft.location, placeholder="e.g. Remote, New York")
        draft.salary_range = st.text_input("Salary range", value=draft.salary_range, placeholder="e.g. $100k - $120k")
        draft.deadline = st.text_input("Deadline", value=draft.deadline, placeholder="e.g. 2025-12-31")
    with c2:
        draft.company = st.text_input("Company *", value=draft.company, placeholder="e.g. Acme Corp")
        types = list(JobType)
        draft.type = st.selectbox(
            "Job type", types, index=types.index(draft.type), format_func=lambda t: t.value
        )
        draft.apply_link = st.text_input("External apply link", value=draft.apply_link, placeholder="https://...")
        draft.image_url = st.text_input("Image URL", value=draft.image_url, placeholder="https://.../poster.png")

    if draft.image_url:
        st.image(draft.image_url, width=240)

    draft.requirements = st.text_input(
        "Requirements (comma-separated)",
        value=draft.requirements,
        placeholder="e.g. React, 5+ years, Team leadership",
    )

    if draft.error:
        st.error(draft.error)
    if st.button("✨ Generate description with AI", disabled=draft.busy):
        try:
            draft.check_can_generate()
        except ValidationError as exc:
            draft.error = str(exc)
        else:
            draft.busy, draft.error = True, None
        st.rerun()

    if draft.busy:
        with st.spinner("Writing description…"):
            try:
                draft.description = _run(
                    state.gateway.generate_description(draft.title, draft.company, draft.key_details())
                )
            except HireAIError as exc:
                log.warning("Description generation failed: %s", exc)
                draft.error = "Failed to generate description. Check your API key or try again."
            finally:
                draft.busy = False
        st.rerun()

    draft.description = st.text_area("Description *", value=draft.description, height=280)

    c1, c2 = st.columns(2)
    with c1:
        if st.button("Cancel", use_container_width=True):
            st.session_state.pop("post_draft", None)
            _go(state.navigator.cancel)
    with c2:
        if st.button("Post Job", type="primary", use_container_width=True, disabled=draft.busy):
            try:
                draft.check_complete()
            except ValidationError as exc:
                st.error(str(exc))
            else:
                state.post_job(draft.to_job())
                st.session_state.pop("post_draft", None)
                st.rerun()


# ── View: Apply ──────────────────────────────────────────────────────────


def view_apply(state: AppState, job: Job) -> None:
    if st.button("← Back to details"):
        _go(state.navigator.cancel)

    st.header(f"Apply for {job.title}")
    st.caption(job.company)
    draft = _apply_draft(job.id)

    c1, c2 = st.columns(2)
    with c1:
        draft.name = st.text_input("Full name *", value=draft.name)
    with c2:
        draft.email = st.text_input("Email *", value=draft.email)
    draft.resume_link = st.text_input("Resume link", value=draft.resume_link, placeholder="https://...")
    draft.skills = st.text_input(
        "Key skills *", value=draft.skills, placeholder="e.g. React, Project Management, Sales"
    )

    if draft.error:
        st.error(draft.error)
    label = "Writing..." if draft.busy else "✨ Write cover letter with AI"
    if st.button(label, disabled=draft.busy):
        try:
            draft.check_can_generate()
        except ValidationError as exc:
            draft.error = str(exc)
        else:
            draft.busy, draft.error = True, None
        st.rerun()

    if draft.busy:
        with st.spinner("Writing cover letter…"):
            try:
                draft.cover_letter = _run(
                    state.gateway.generate_cover_letter(job.title, job.company, draft.name, draft.skills)
                )
            except HireAIError as exc:
                log.warning("Cover letter generation failed: %s", exc)
                draft.error = "Failed to generate cover letter."
            finally:
                draft.busy = False
        st.rerun()

    draft.cover_letter = st.text_area(
        "Cover letter *",
        value=draft.cover_letter,
        height=220,
        placeholder="Generate with AI or write your own...",
    )

    if st.button("Submit Application", type="primary", use_container_width=True, disabled=draft.busy):
        try:
            draft.check_complete()
        except ValidationError as exc:
            st.error(str(exc))
        else:
            state.submit_application(draft.to_application(job.id))
            st.session_state.get("apply_drafts", {}).pop(job.id, None)
            st.rerun()


# ── View: Discover ───────────────────────────────────────────────────────


def view_discover(state: AppState) -> None:
    st.header("Discover Jobs with Google Search")
    st.write("Search for the latest openings across the web.")

    busy = st.session_state.get("search_busy", False)
    with st.form("search"):
        query = st.text_input(
            "Query",
            value=st.session_state.get("search_query", state.settings.default_search_query),
            placeholder="e.g. site:jobz.pk software engineer",
        )
        submitted = st.form_submit_button("Search", type="primary", disabled=busy)

    if submitted and query.strip():
        st.session_state["search_query"] = query
        st.session_state["search_busy"] = True
        st.session_state.pop("search_result", None)
        st.session_state.pop("search_error", None)
        st.rerun()

    if busy:
        with st.spinner("Searching the web…"):
            try:
                st.session_state["search_result"] = _run(
                    state.gateway.search_jobs(st.session_state["search_query"])
                )
            except HireAIError as exc:
                log.warning("Job search failed: %s", exc)
                st.session_state["search_error"] = (
                    "Failed to fetch jobs. Please check your connection and try again."
                )
            finally:
                st.session_state["search_busy"] = False
        st.rerun()

    if st.session_state.get("search_error"):
        st.error(st.session_state["search_error"])

    result = st.session_state.get("search_result")
    if result is None:
        return

    with st.container(border=True):
        st.markdown(result.summary)

    if result.sources:
        st.subheader("Sources")
        for source in result.sources:
            st.markdown(f"- [{source.title}]({source.uri})")
    else:
        st.info("No direct sources found. Try adjusting your search query.")


# ── Main ─────────────────────────────────────────────────────────────────


def _check(label: str, ok: bool) -> str:
    icon = "✅" if ok else "⬜"
    return f"{icon}  {label}"


def _sidebar(state: AppState) -> None:
    with st.sidebar:
        st.title("HireAI")
        if st.button("Local Jobs", use_container_width=True):
            _go(state.navigator.home)
        if st.button("Discover", use_container_width=True):
            _go(state.navigator.discover)
        if st.button("Post a Job", type="primary", use_container_width=True):
            _go(state.navigator.new_job)

        st.divider()
        st.markdown("**Status**")
        st.markdown(_check("AI assistant configured", not isinstance(state.gateway.model, UnconfiguredModel)))
        st.markdown(_check(f"{len(state.store)} job(s) saved", len(state.store) > 0))
        st.caption(f"© {datetime.now().year} HireAI. Powered by Gemini.")


@st.fragment(run_every=1)
def _notice(state: AppState) -> None:
    # Reruns on its own so the banner clears once the notice expires.
    notice = state.notifier.current()
    if notice is None:
        return
    if notice.kind == "success":
        st.success(notice.message)
    else:
        st.info(notice.message)


def render(state: AppState) -> None:
    view = state.view
    match view:
        case ListView():
            view_list(state)
        case DetailsView() | ApplyView():
            job = state.resolve_job(view)
            if job is None:
                _not_found()
            elif isinstance(view, DetailsView):
                view_details(state, job)
            else:
                view_apply(state, job)
        case PostView():
            view_post(state)
        case DiscoverView():
            view_discover(state)
        case _:
            assert_never(view)


def main() -> None:
    st.set_page_config(page_title="HireAI Job Board", page_icon="💼", layout="wide")
    st.markdown(_CSS, unsafe_allow_html=True)
    state = _state()
    _sidebar(state)
    _notice(state)
    render(state)


main()
