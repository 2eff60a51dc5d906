"""Notification feed ordering and read state."""
import pytest

from vetspark.exceptions import NotFoundError
from vetspark.models.notification import NotificationClass


def test_emit_prepends_newest_first(coordinator, clock) -> None:
    first = coordinator.record_event({"title": "One", "message": "first"})
    clock.advance(minutes=1)
    second = coordinator.record_event({"title": "Two", "message": "second", "type": "warning"})

    feed = coordinator.feed_snapshot()
    assert [n.id for n in feed] == [second.id, first.id]
    assert feed[0].timestamp > feed[1].timestamp
    assert feed[0].type == NotificationClass.WARNING
    assert not feed[0].read


def test_action_label_and_link(coordinator) -> None:
    n = coordinator.record_event({
        "title": "Vaccine due",
        "message": "Rabies booster in 2 days",
        "action_label": "Book now",
        "action_link": "/appointments",
    })
    assert n.action_label == "Book now"
    assert n.action_link == "/appointments"


def test_mark_read_is_idempotent(coordinator) -> None:
    n = coordinator.record_event({"title": "Hi", "message": "there"})

    assert coordinator.mark_read(n.id).read
    assert coordinator.mark_read(n.id).read
    assert coordinator.unread_count() == 0


def test_mark_read_unknown_id(coordinator) -> None:
    with pytest.raises(NotFoundError):
        coordinator.mark_read("n-404")


def test_mark_all_read(coordinator) -> None:
    for i in range(3):
        coordinator.record_event({"title": f"Event {i}", "message": "x"})
    coordinator.mark_read(coordinator.feed_snapshot()[0].id)

    assert coordinator.mark_all_read() == 2
    assert coordinator.mark_all_read() == 0
    assert all(n.read for n in coordinator.feed_snapshot())


def test_mark_all_read_on_empty_feed(coordinator) -> None:
    assert coordinator.mark_all_read() == 0
    assert coordinator.unread_count() == 0


def test_unread_count_tracks_feed(coordinator, pet_ids) -> None:
    coordinator.register_walk_in("URGENT")
    coordinator.record_event({"title": "A", "message": "a"})
    coordinator.record_event({"title": "B", "message": "b"})
    feed = coordinator.feed_snapshot()
    coordinator.mark_read(feed[1].id)

    feed = coordinator.feed_snapshot()
    assert coordinator.unread_count() == sum(1 for n in feed if not n.read) == 2


def test_read_never_reverts(coordinator) -> None:
    n = coordinator.record_event({"title": "A", "message": "a"})
    coordinator.mark_all_read()
    coordinator.record_event({"title": "B", "message": "b"})

    feed = {x.id: x for x in coordinator.feed_snapshot()}
    assert feed[n.id].read
    assert coordinator.unread_count() == 1


def test_snapshot_limit_and_unread_only(coordinator) -> None:
    for i in range(5):
        coordinator.record_event({"title": f"Event {i}", "message": "x"})
    newest = coordinator.feed_snapshot(limit=2)
    assert [n.title for n in newest] == ["Event 4", "Event 3"]

    coordinator.mark_read(newest[0].id)
    unread = coordinator.feed_snapshot(unread_only=True)
    assert [n.title for n in unread] == ["Event 3", "Event 2", "Event 1", "Event 0"]


def test_feed_display(coordinator) -> None:
    coordinator.record_event({"title": "A", "message": "a"})
    display = coordinator.feed_display()
    assert display.unread_count == 1
    assert len(display.notifications) == 1


def test_snapshot_is_a_copy(coordinator) -> None:
    coordinator.record_event({"title": "A", "message": "a"})
    snapshot = coordinator.feed_snapshot()
    snapshot[0].read = True
    snapshot.clear()

    assert coordinator.unread_count() == 1
    assert len(coordinator.feed_snapshot()) == 1
