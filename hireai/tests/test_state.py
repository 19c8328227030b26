from hireai.drafts import ApplicationDraft, PostDraft
from hireai.navigation import ApplyView, DetailsView, DiscoverView, ListView, PostView


def test_post_new_job_end_to_end(app_state, clock):
    assert len(app_state.store) == 2
    app_state.navigator.new_job()

    draft = PostDraft(title="X", company="Co", location="Remote", description="Do things")
    app_state.post_job(draft.to_job())

    jobs = app_state.store.jobs
    assert len(jobs) == 3
    assert jobs[0].title == "X"
    assert app_state.view == ListView()

    notice = app_state.notifier.current()
    assert notice.message == "Job posted successfully!"
    assert notice.kind == "success"
    clock.advance(3.0)
    assert app_state.notifier.current() is None


def test_submit_application(app_state, caplog):
    app_state.navigator.select("1")
    app_state.navigator.apply()
    draft = ApplicationDraft(name="Ali", email="ali@x.pk", cover_letter="Hello")

    with caplog.at_level("INFO"):
        app_state.submit_application(draft.to_application("1"))

    assert app_state.view == ListView()
    assert app_state.notifier.current().message == "Application submitted to ali@x.pk!"
    assert "Application received" in caplog.text
    assert len(app_state.store) == 2


def test_resolve_job(app_state):
    assert app_state.resolve_job(DetailsView("2")).title == "Product Designer"
    assert app_state.resolve_job(ApplyView("1")).company == "TechFlow"
    for view in (ListView(), PostView(), DiscoverView()):
        assert app_state.resolve_job(view) is None


def test_dangling_reference_is_not_redirected(app_state):
    app_state.navigator.select("gone")
    assert app_state.resolve_job() is None
    assert app_state.view == DetailsView("gone")
