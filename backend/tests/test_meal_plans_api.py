from __future__ import annotations

import json
from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from nourishplate.api.routes.meal_plans import get_generator
from nourishplate.db.deps import get_db
from nourishplate.db.models.meal_plan import MealPlanRecord
from nourishplate.db.models.plan_action_log import PlanActionLog
from nourishplate.main import app
from nourishplate.services.meal_plan_generator import MealPlanGenerator


class FakeOracle:
    def __init__(self, responses):
        self.responses = list(responses)
        self.calls = 0

    def complete(self, prompt, config):
        self.calls += 1
        if not self.responses:
            raise RuntimeError("No more fake responses")
        return self.responses.pop(0)


@pytest.fixture()
def client():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        future=True,
    )
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    MealPlanRecord.__table__.create(bind=engine)
    PlanActionLog.__table__.create(bind=engine)
    oracle = FakeOracle([])

    def override_get_db():
        db = TestingSessionLocal()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_generator] = lambda: MealPlanGenerator(oracle)
    with TestClient(app) as test_client:
        yield test_client, TestingSessionLocal, oracle
    app.dependency_overrides.clear()


def _generate(test_client: TestClient, subject_id: UUID | None = None, **overrides) -> dict:
    payload = {
        "subject_id": str(subject_id or uuid4()),
        "subject_name": "Mia",
        "duration": 3,
        "preferences": {"kid_age": 7, "allergies": ["peanuts"]},
    }
    payload.update(overrides)
    response = test_client.post("/meal-plans/generate", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


def test_generate_saves_active_plan_and_echoes_request_id(client):
    test_client, SessionLocal, _ = client
    subject_id = uuid4()

    response = test_client.post(
        "/meal-plans/generate",
        json={"subject_id": str(subject_id), "subject_name": "Mia", "duration": 3},
        headers={"X-Request-ID": "req-generate-1"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["request_id"] == "req-generate-1"
    assert response.headers["X-Request-ID"] == "req-generate-1"
    assert data["saved"] is True
    assert data["is_active"] is True
    assert len(data["plan"]["daily_plans"]) == 3
    with SessionLocal() as db:
        stored = db.query(MealPlanRecord).filter_by(subject_id=subject_id).one()
        assert stored.is_active is True
        log = db.query(PlanActionLog).filter_by(plan_id=stored.id).one()
        assert log.action_payload["request_id"] == "req-generate-1"


def test_generate_with_model_answer(client):
    test_client, _, oracle = client
    day = {
        slot: {"name": f"{slot} special", "calories": 250, "nutrition": {"protein": 9}}
        for slot in ("breakfast", "lunch", "snack")
    }
    oracle.responses.append(
        json.dumps({"title": "Mia's Week", "description": "Fresh ideas", "daily_plans": [day, day]})
    )

    data = _generate(test_client, duration=2)

    assert data["plan"]["title"] == "Mia's Week"
    assert data["plan"]["daily_plans"][1]["total_calories"] == 750
    assert oracle.calls == 1


@pytest.mark.parametrize("duration", [0, 91])
def test_generate_rejects_out_of_range_duration(client, duration):
    test_client, _, oracle = client

    response = test_client.post(
        "/meal-plans/generate",
        json={"subject_id": str(uuid4()), "subject_name": "Mia", "duration": duration},
    )

    assert response.status_code == 422
    assert oracle.calls == 0


def test_generate_rejects_non_list_preference_values(client):
    test_client, SessionLocal, oracle = client

    response = test_client.post(
        "/meal-plans/generate",
        json={"subject_id": str(uuid4()), "subject_name": "Mia", "preferences": {"allergies": 5}},
    )

    assert response.status_code == 422
    assert "expected a list of strings" in response.text
    assert oracle.calls == 0
    with SessionLocal() as db:
        assert db.query(MealPlanRecord).count() == 0


def test_unsaved_plan_is_not_persisted(client):
    test_client, SessionLocal, _ = client

    data = _generate(test_client, save=False)

    assert data["saved"] is False
    with SessionLocal() as db:
        assert db.query(MealPlanRecord).count() == 0


def test_list_active_and_detail(client):
    test_client, _, _ = client
    subject_id = uuid4()
    first = _generate(test_client, subject_id)
    second = _generate(test_client, subject_id)

    listing = test_client.get("/meal-plans", params={"subject_id": str(subject_id)})
    active = test_client.get("/meal-plans/active", params={"subject_id": str(subject_id)})
    detail = test_client.get(f"/meal-plans/{first['plan']['id']}")

    assert listing.status_code == 200
    items = {item["id"]: item["is_active"] for item in listing.json()["items"]}
    assert items == {first["plan"]["id"]: False, second["plan"]["id"]: True}
    assert active.json()["id"] == second["plan"]["id"]
    assert detail.status_code == 200
    assert detail.json()["plan"]["daily_plans"][0]["day"] == 1
    assert detail.json()["request_id"]


def test_activate_then_deactivate(client):
    test_client, _, _ = client
    subject_id = uuid4()
    first = _generate(test_client, subject_id)
    _generate(test_client, subject_id)

    activated = test_client.post(f"/meal-plans/{first['plan']['id']}/activate")
    assert activated.status_code == 200
    assert activated.json()["is_active"] is True
    assert test_client.get("/meal-plans/active", params={"subject_id": str(subject_id)}).json()["id"] == first["plan"]["id"]

    deactivated = test_client.post(f"/meal-plans/{first['plan']['id']}/deactivate")
    assert deactivated.json()["is_active"] is False
    assert test_client.get("/meal-plans/active", params={"subject_id": str(subject_id)}).status_code == 404


def test_delete_active_plan_leaves_no_active_plan(client):
    test_client, _, _ = client
    subject_id = uuid4()
    _generate(test_client, subject_id)
    latest = _generate(test_client, subject_id)

    response = test_client.delete(f"/meal-plans/{latest['plan']['id']}")

    assert response.status_code == 204
    assert test_client.get(f"/meal-plans/{latest['plan']['id']}").status_code == 404
    assert test_client.get("/meal-plans/active", params={"subject_id": str(subject_id)}).status_code == 404


def test_unknown_plan_returns_404(client):
    test_client, _, _ = client
    missing = uuid4()

    assert test_client.get(f"/meal-plans/{missing}").status_code == 404
    assert test_client.post(f"/meal-plans/{missing}/activate").status_code == 404
    assert test_client.delete(f"/meal-plans/{missing}").status_code == 404


def test_replace_meal_updates_day_totals(client):
    test_client, _, oracle = client
    created = _generate(test_client)
    plan_id = created["plan"]["id"]
    original_day = created["plan"]["daily_plans"][0]
    oracle.responses.append(json.dumps({"name": "Cheesy Bean Quesadilla", "calories": 410, "nutrition": {"protein": 15}}))

    response = test_client.post(
        f"/meal-plans/{plan_id}/replace-meal",
        json={"day": 1, "slot": "lunch", "subject_name": "Mia"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["replaced_meal"] == "Cheesy Bean Quesadilla"
    old_lunch = original_day["meals"]["lunch"]["calories"]
    assert data["day"]["total_calories"] == original_day["total_calories"] - old_lunch + 410
    stored = test_client.get(f"/meal-plans/{plan_id}").json()
    assert stored["plan"]["daily_plans"][0]["meals"]["lunch"]["name"] == "Cheesy Bean Quesadilla"


def test_replace_meal_for_missing_slot_is_bad_request(client):
    test_client, _, _ = client
    created = _generate(test_client)

    response = test_client.post(
        f"/meal-plans/{created['plan']['id']}/replace-meal",
        json={"day": 1, "slot": "dinner", "subject_name": "Mia"},
    )

    assert response.status_code == 400


def test_adult_plans_default_to_four_slots(client):
    test_client, _, _ = client

    data = _generate(test_client, subject_type="adult", preferences={"age": 34})

    assert list(data["plan"]["daily_plans"][0]["meals"]) == ["breakfast", "lunch", "dinner", "snack"]
    assert data["plan"]["title"] == "Meal Plan for Mia"
