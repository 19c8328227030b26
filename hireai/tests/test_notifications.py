from hireai.notifications import Notifier


def test_notice_expires_after_three_seconds(clock):
    notifier = Notifier(clock=clock)
    notifier.show("Job posted successfully!")
    clock.advance(2.5)
    assert notifier.current().message == "Job posted successfully!"
    clock.advance(0.5)
    assert notifier.current() is None


def test_newest_notice_replaces_oldest(clock):
    notifier = Notifier(clock=clock)
    notifier.show("first")
    clock.advance(2)
    notifier.show("second", kind="info")
    clock.advance(2)
    notice = notifier.current()
    assert notice.message == "second"
    assert notice.kind == "info"


def test_nothing_shown_initially(clock):
    assert Notifier(clock=clock).current() is None


def test_banner_polled_every_second_clears_without_new_notices(clock):
    notifier = Notifier(clock=clock)
    notifier.show("Job posted successfully!")
    seen = []
    for _ in range(5):
        notice = notifier.current()
        seen.append(notice.message if notice else None)
        clock.advance(1)
    assert seen == ["Job posted successfully!"] * 3 + [None, None]
