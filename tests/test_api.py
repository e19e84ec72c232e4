# tests/test_api.py
"""
Handler-level tests against the real app with a stubbed AI gateway.
"""
from __future__ import annotations

import httpx
import pytest

from conftest import Recorder, tool_call_reply

ENDPOINTS = ["/api/v1/nutrition/analyze", "/api/v1/workouts/generate"]
ALLOW_HEADERS = (
    "authorization, x-client-info, apikey, content-type, "
    "x-supabase-client-platform, x-supabase-client-platform-version, "
    "x-supabase-client-runtime, x-supabase-client-runtime-version"
)
MEAL = {"food_description": "2 eggs, toast with butter, orange juice", "meal_type": "breakfast"}
BREAKFAST = {
    "calories": 350,
    "protein_g": 15,
    "carbs_g": 40,
    "fat_g": 14,
    "analysis": "Balanced breakfast.",
}
PLAN = {
    "title": "Beginner Full Body",
    "description": "A gentle introduction to strength training.",
    "difficulty": "beginner",
    "duration_minutes": 25,
    "exercises": [
        {"name": "Bodyweight Squat", "sets": 3, "reps": "12", "rest_seconds": 60},
        {"name": "Wall Push-up", "sets": 3, "reps": "10", "rest_seconds": 60},
    ],
}


def _body(path: str) -> dict:
    return MEAL if "nutrition" in path else {"profile": None}


def _assert_cors(resp: httpx.Response) -> None:
    assert resp.headers["access-control-allow-origin"] == "*"
    assert resp.headers["access-control-allow-headers"] == ALLOW_HEADERS


# ── preflight ───────────────────────────────────────────────────────
@pytest.mark.parametrize("path", ENDPOINTS)
def test_options_preflight(api, path):
    rec = Recorder(200, json={})
    resp = api(rec).options(path)
    assert resp.status_code == 200
    assert resp.content == b""
    _assert_cors(resp)
    assert rec.requests == []


# ── upstream failures ───────────────────────────────────────────────
@pytest.mark.parametrize("path", ENDPOINTS)
def test_rate_limited(api, path):
    resp = api(Recorder(429, json={})).post(path, json=_body(path))
    assert resp.status_code == 429
    assert resp.json() == {"error": "Rate limited, try again shortly"}
    _assert_cors(resp)


@pytest.mark.parametrize("path", ENDPOINTS)
def test_credits_exhausted(api, path):
    resp = api(Recorder(402, json={})).post(path, json=_body(path))
    assert resp.status_code == 402
    assert resp.json() == {"error": "AI credits exhausted"}
    _assert_cors(resp)


@pytest.mark.parametrize("path", ENDPOINTS)
def test_other_upstream_status_is_500(api, path):
    resp = api(Recorder(503, text="down")).post(path, json=_body(path))
    assert resp.status_code == 500
    assert resp.json() == {"error": "AI gateway error"}
    _assert_cors(resp)


@pytest.mark.parametrize("path", ENDPOINTS)
def test_missing_credential_is_500(api, path):
    rec = Recorder(200, json={})
    resp = api(rec, api_key=None).post(path, json=_body(path))
    assert resp.status_code == 500
    assert resp.json() == {"error": "API key not configured"}
    assert rec.requests == []


@pytest.mark.parametrize(
    "path, message",
    [(ENDPOINTS[0], "No analysis returned"), (ENDPOINTS[1], "No workout plan returned")],
)
def test_absent_tool_call_is_500(api, path, message):
    reply = {"choices": [{"message": {"content": "Sure! Here you go."}}]}
    resp = api(Recorder(200, json=reply)).post(path, json=_body(path))
    assert resp.status_code == 500
    assert resp.json() == {"error": message}


def test_malformed_arguments_is_500(api):
    resp = api(Recorder(200, json=tool_call_reply("{calories: 1"))).post(ENDPOINTS[0], json=MEAL)
    assert resp.status_code == 500
    assert resp.json()["error"].startswith("Malformed structured result")


# ── caller input errors ─────────────────────────────────────────────
@pytest.mark.parametrize(
    "body",
    [
        {"meal_type": "lunch"},
        {"food_description": "", "meal_type": "lunch"},
        {"food_description": "soup", "meal_type": "elevenses"},
    ],
)
def test_nutrition_bad_input_is_400(api, body):
    rec = Recorder(200, json={})
    resp = api(rec).post(ENDPOINTS[0], json=body)
    assert resp.status_code == 400
    assert "error" in resp.json()
    _assert_cors(resp)
    assert rec.requests == []


@pytest.mark.parametrize("path", ENDPOINTS)
def test_unparseable_json_is_400(api, path):
    resp = api(Recorder(200, json={})).post(
        path, content=b"{not json", headers={"content-type": "application/json"}
    )
    assert resp.status_code == 400
    assert "error" in resp.json()
    _assert_cors(resp)


# ── end-to-end scenarios ────────────────────────────────────────────
def test_breakfast_scenario(api):
    rec = Recorder(200, json=tool_call_reply(BREAKFAST))
    resp = api(rec).post(ENDPOINTS[0], json=MEAL)
    assert resp.status_code == 200
    assert resp.json() == BREAKFAST
    _assert_cors(resp)
    assert '"2 eggs, toast with butter, orange juice"' in rec.last_body["messages"][1]["content"]


def test_workout_null_profile_scenario(api):
    rec = Recorder(200, json=tool_call_reply(PLAN, name="create_workout"))
    resp = api(rec).post(ENDPOINTS[1], json={"profile": None})
    assert resp.status_code == 200
    assert resp.json() == PLAN

    instruction = rec.last_body["messages"][1]["content"]
    assert "No profile data available" in instruction
    assert "general beginner workout" in instruction


def test_workout_profile_key_may_be_omitted(api):
    rec = Recorder(200, json=tool_call_reply(PLAN, name="create_workout"))
    resp = api(rec).post(ENDPOINTS[1], json={})
    assert resp.status_code == 200
    assert "No profile data available" in rec.last_body["messages"][1]["content"]


def test_workout_with_profile_row(api):
    rec = Recorder(200, json=tool_call_reply(dict(PLAN, exercises=None), name="create_workout"))
    profile = {
        "id": "8b0c",
        "user_id": "u-1",
        "full_name": "Sam",
        "age": 41,
        "gender": "other",
        "weight_kg": 72.5,
        "height_cm": 170,
        "activity_level": "light",
        "fitness_goal": None,
        "bmi": 25.1,
        "daily_calories": 1950,
    }
    resp = api(rec).post(ENDPOINTS[1], json={"profile": profile})
    assert resp.status_code == 200
    assert resp.json()["exercises"] == []

    instruction = rec.last_body["messages"][1]["content"]
    assert "Age 41, Gender other, Weight 72.5kg, Height 170cm" in instruction
    assert "Goal: unknown" in instruction


# ── metrics / dashboard / meta ──────────────────────────────────────
def test_profile_metrics(api):
    client = api(Recorder(200, json={}))
    resp = client.post(
        "/api/v1/profile/metrics",
        json={"age": 30, "gender": "male", "weight_kg": 70, "height_cm": 175, "activity_level": "moderate"},
    )
    assert resp.status_code == 200
    assert resp.json() == {"metrics": {"bmi": 22.9, "bmr": 1649, "daily_calories": 2556}}
    _assert_cors(resp)

    resp = client.post("/api/v1/profile/metrics", json={"age": 30, "weight_kg": 70, "height_cm": 175})
    assert resp.json() == {"metrics": None}


def test_dashboard_summary(api):
    resp = api(Recorder(200, json={})).post(
        "/api/v1/dashboard/summary",
        json={
            "today": "2026-10-19",
            "nutrition_logs": [
                {"logged_at": "2026-10-19T08:00:00Z", "calories": 350},
                {"logged_at": "2026-10-19T13:00:00Z", "calories": 600},
                {"logged_at": "2026-10-17T19:00:00Z", "calories": 800},
            ],
            "workout_plans": [
                {"created_at": "2026-10-19T07:00:00Z", "completed": True},
                {"created_at": "2026-10-18T07:00:00Z", "completed": False},
            ],
        },
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["calories_today"] == 950
    assert (data["workouts_completed"], data["workouts_total"]) == (1, 2)
    assert [d["calories"] for d in data["calorie_series"]] == [0, 0, 0, 0, 800, 0, 950]


def test_unknown_route_keeps_error_shape(api):
    resp = api(Recorder(200, json={})).get("/api/v1/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}
    _assert_cors(resp)


def test_health(api):
    resp = api(Recorder(200, json={})).get("/health")
    assert resp.json()["status"] == "ok"


def test_profile_metrics_rejects_negative_and_nan(api):
    client = api(Recorder(200, json={}))
    resp = client.post(
        "/api/v1/profile/metrics",
        json={"age": -30, "gender": "male", "weight_kg": -70, "height_cm": 175},
    )
    assert resp.status_code == 200
    assert resp.json() == {"metrics": None}

    resp = client.post(
        "/api/v1/profile/metrics",
        content=b'{"age": 30, "gender": "male", "weight_kg": NaN, "height_cm": 175}',
        headers={"content-type": "application/json"},
    )
    assert resp.status_code == 400
    assert "weight_kg" in resp.json()["error"]
    _assert_cors(resp)


def test_coerced_upstream_numbers_are_rejected(api):
    reply = tool_call_reply(dict(BREAKFAST, calories=True, protein_g="15"))
    resp = api(Recorder(200, json=reply)).post(ENDPOINTS[0], json=MEAL)
    assert resp.status_code == 500
    assert resp.json() == {"error": "Invalid structured result: calories, protein_g"}


# ── logging / unexpected failures ───────────────────────────────────
def test_upstream_failure_is_logged(api, caplog):
    with caplog.at_level("ERROR", logger="main"):
        resp = api(Recorder(402, json={})).post(ENDPOINTS[0], json=MEAL)
    assert resp.status_code == 402
    records = [r for r in caplog.records if r.name == "main" and r.levelname == "ERROR"]
    assert any("AI credits exhausted" in r.getMessage() for r in records)


def test_unexpected_exception_keeps_cors_and_error_shape(api, caplog, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("prompt assembly exploded")

    monkeypatch.setattr("services.extraction.nutrition_prompt", boom)
    with caplog.at_level("ERROR", logger="main"):
        resp = api(Recorder(200, json={})).post(ENDPOINTS[0], json=MEAL)
    assert resp.status_code == 500
    assert resp.json() == {"error": "prompt assembly exploded"}
    _assert_cors(resp)
    assert any(r.name == "main" and r.exc_info for r in caplog.records)


def test_wrong_method_keeps_allow_header(api):
    resp = api(Recorder(200, json={})).get(ENDPOINTS[0])
    assert resp.status_code == 405
    assert resp.headers["allow"] == "POST"
    assert resp.json() == {"error": "Method Not Allowed"}
    _assert_cors(resp)
