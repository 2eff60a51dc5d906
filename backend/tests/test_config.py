"""Settings and demo seed."""
from vetspark.config import Settings, get_settings
from vetspark.seed import seed_demo_data


def test_settings_defaults(monkeypatch) -> None:
    monkeypatch.delenv("CLINIC_NAME", raising=False)
    settings = Settings()
    assert settings.CLINIC_NAME == "Happy Paws Hospital"
    assert settings.REMINDER_WINDOW_HOURS == 48
    assert settings.LOG_FORMAT == "console"


def test_settings_from_env(monkeypatch) -> None:
    monkeypatch.setenv("CLINIC_NAME", "Night Owl Vets")
    monkeypatch.setenv("SEED_DEMO_DATA", "false")
    monkeypatch.setenv("LOG_FORMAT", "json")
    settings = Settings()
    assert settings.CLINIC_NAME == "Night Owl Vets"
    assert settings.SEED_DEMO_DATA is False
    assert settings.LOG_FORMAT == "json"


def test_get_settings_is_cached() -> None:
    assert get_settings() is get_settings()


def test_seed_demo_data(empty_coordinator) -> None:
    seed_demo_data(empty_coordinator)

    assert [p.name for p in empty_coordinator.list_pets()] == ["Mochi", "Luna"]
    assert [r.id for r in empty_coordinator.overdue_reminders()] == ["m1"]
    assert [r.id for r in empty_coordinator.due_within()] == ["m3"]
    assert [a.id for a in empty_coordinator.queue_snapshot()] == ["a1"]

    feed = empty_coordinator.feed_snapshot()
    assert [n.title for n in feed] == ["Welcome to VetSpark"]
    assert empty_coordinator.unread_count() == 1
