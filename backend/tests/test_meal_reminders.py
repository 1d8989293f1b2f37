from datetime import date

import pytest

from nourishplate.api.schemas.meal_plan import PlanPreferences
from nourishplate.services import meal_reminders
from nourishplate.services.fallback_planner import synthesize_fallback_plan
from nourishplate.services.meal_reminders import build_plan_reminders, dispatch_reminders


def _plan():
    prefs = PlanPreferences(meal_slots=["breakfast", "lunch", "dinner", "snack"])
    return synthesize_fallback_plan(prefs, "Sam", 3, subject_type="adult", start_date=date(2026, 4, 6))


def test_reminders_follow_slot_schedule_for_matching_day():
    plan = _plan()

    payloads = build_plan_reminders(plan, date(2026, 4, 7))

    assert [p["slot"] for p in payloads] == ["breakfast", "lunch", "dinner", "snack"]
    assert payloads[0]["send_at"].startswith("2026-04-07T07:30:00")
    assert payloads[2]["send_at"].startswith("2026-04-07T18:30:00")
    assert plan.daily_plans[1].meals["lunch"].name in payloads[1]["body"]


def test_no_reminders_outside_plan_dates():
    assert build_plan_reminders(_plan(), date(2026, 5, 1)) == []


def test_dispatch_is_skipped_when_notifications_disabled(monkeypatch):
    monkeypatch.setattr(meal_reminders.settings, "notifications_enabled", False)

    assert dispatch_reminders([{"slot": "lunch"}]) == 0


def test_dispatch_posts_to_webhook(monkeypatch):
    sent = {}

    class FakeResponse:
        status_code = 202
        text = ""

    class FakeClient:
        def __init__(self, timeout):
            sent["timeout"] = timeout

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def post(self, url, json, headers):
            sent["url"] = url
            sent["json"] = json
            return FakeResponse()

    monkeypatch.setattr(meal_reminders.settings, "notifications_enabled", True)
    monkeypatch.setattr(meal_reminders.settings, "notifications_provider", "webhook")
    monkeypatch.setattr(meal_reminders.settings, "notifications_webhook_url", "https://hooks.example.test/meals")
    monkeypatch.setattr(meal_reminders.httpx, "Client", FakeClient)
    payloads = build_plan_reminders(_plan(), date(2026, 4, 6))

    assert dispatch_reminders(payloads) == 4
    assert sent["url"] == "https://hooks.example.test/meals"
    assert len(sent["json"]) == 4


def test_dispatch_error_status_raises(monkeypatch):
    class FakeResponse:
        status_code = 500
        text = "boom"

    class FakeClient:
        def __init__(self, timeout):
            pass

        def __enter__(self):
            return self

        def __exit__(self, *exc):
            return False

        def post(self, url, json, headers):
            return FakeResponse()

    monkeypatch.setattr(meal_reminders.settings, "notifications_enabled", True)
    monkeypatch.setattr(meal_reminders.settings, "notifications_provider", "webhook")
    monkeypatch.setattr(meal_reminders.settings, "notifications_webhook_url", "https://hooks.example.test/meals")
    monkeypatch.setattr(meal_reminders.httpx, "Client", FakeClient)

    with pytest.raises(RuntimeError):
        dispatch_reminders([{"slot": "lunch"}])
