"""
Scheduling endpoints exercised through the FastAPI app with a pinned clock.
"""


def _payload(**overrides) -> dict:
    body = {
        "title": "Design review",
        "duration_minutes": 30,
        "attendees": [{"email": "ana@example.com", "name": "Ana"}],
        "earliest_date": "2024-01-16T00:00:00Z",
        "latest_date": "2024-01-16T23:00:00Z",
    }
    body.update(overrides)
    return body


def test_suggestions_are_ranked_with_conflicts_reported(client):
    payload = _payload(
        existing_meetings=[
            {
                "id": "standup",
                "title": "Standup",
                "start": "2024-01-16T10:00:00Z",
                "end": "2024-01-16T11:00:00Z",
            }
        ]
    )

    response = client.post("/scheduling/suggestions", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert len(data["suggestions"]) == 10
    assert data["best_suggestion"]["start"].startswith("2024-01-16T09:00:00")
    assert data["best_suggestion"]["conflicts"] == []
    assert data["best_suggestion"]["attendee_availability"] == {"ana@example.com": "unknown"}
    assert [m["id"] for m in data["conflicts"]] == ["standup"]
    assert data["summary"] == {
        "total_suggestions": 10,
        "optimal_slots": 7,
        "suboptimal_slots": 3,
        "conflict_count": 1,
    }


def test_default_search_period_uses_request_clock(client):
    payload = _payload(earliest_date=None, latest_date=None)

    response = client.post("/scheduling/suggestions", json=payload)

    assert response.status_code == 200
    starts = [s["start"] for s in response.json()["suggestions"]]
    # Pinned clock is Monday 2024-01-15 noon; the search begins a day later
    assert all(start >= "2024-01-16" for start in starts)


def test_request_id_is_echoed(client):
    response = client.post(
        "/scheduling/suggestions", json=_payload(), headers={"X-Request-ID": "req-123"}
    )

    assert response.headers["X-Request-ID"] == "req-123"


def test_request_id_is_generated_when_missing(client):
    response = client.get("/healthz")

    assert response.headers["X-Request-ID"]


def test_invalid_request_returns_all_errors(client):
    response = client.post(
        "/scheduling/suggestions", json=_payload(duration_minutes=0, attendees=[])
    )

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == [
        "Meeting duration must be positive",
        "At least one attendee is required",
    ]


def test_malformed_working_hours_are_rejected(client):
    response = client.post(
        "/scheduling/suggestions",
        json=_payload(working_hours={"start": "9am", "end": "17:00"}),
    )

    assert response.status_code == 422
    detail = response.json()["detail"]
    assert detail["field"] == "working_hours.start"
    assert "HH:MM" in detail["message"]


def test_meeting_ending_before_it_starts_is_rejected(client):
    payload = _payload(
        existing_meetings=[{"start": "2024-01-16T11:00:00Z", "end": "2024-01-16T10:00:00Z"}]
    )

    response = client.post("/scheduling/suggestions", json=payload)

    assert response.status_code == 422
    assert response.json()["detail"]["message"] == "Start date must be before end date"


def test_validate_endpoint_reports_problems(client):
    response = client.post(
        "/scheduling/validate", json=_payload(duration_minutes=600, timezone="Nowhere/City")
    )

    assert response.status_code == 200
    assert response.json() == {
        "valid": False,
        "errors": ["Meeting duration cannot exceed 8 hours", "Unknown timezone: Nowhere/City"],
    }


def test_validate_endpoint_accepts_good_request(client):
    response = client.post("/scheduling/validate", json=_payload())

    assert response.json() == {"valid": True, "errors": []}


def test_oversized_buffer_is_a_validation_error(client):
    response = client.post("/scheduling/suggestions", json=_payload(buffer_minutes=10**10))

    assert response.status_code == 422
    assert response.json()["detail"]["errors"] == ["Buffer minutes cannot exceed 24 hours"]
