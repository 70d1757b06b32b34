import logging

FORM = {
    "name": "Lena Park",
    "bio": "Session violinist who has toured with orchestras across three continents.",
    "category": ["Singers"],
    "languages": ["English"],
    "fee_range": "$2000+",
    "location": "Boston, MA",
}


def test_submit_valid_application(client, caplog):
    caplog.set_level(logging.INFO, logger="artistly.services.intake_wizard")
    res = client.post("/api/v1/onboarding/", json=FORM)
    assert res.status_code == 201
    body = res.json()
    assert body["submitted"] is True
    assert body["name"] == "Lena Park"
    assert any("Artist application submitted" in r.getMessage() for r in caplog.records)


def test_submit_invalid_application(client):
    res = client.post("/api/v1/onboarding/", json={**FORM, "bio": "Ten chars."})
    assert res.status_code == 422
    assert res.json()["detail"] == {
        "message": "Invalid artist application",
        "field_errors": {"bio": "Bio must be at least 50 characters"},
    }


def test_submit_null_fields_reports_field_messages(client):
    res = client.post("/api/v1/onboarding/", json={**FORM, "name": None, "category": None})
    assert res.status_code == 422
    assert res.json()["detail"] == {
        "message": "Invalid artist application",
        "field_errors": {
            "name": "Name is required",
            "category": "Please select at least one category",
        },
    }


def test_validate_endpoint(client):
    res = client.post("/api/v1/onboarding/validate", json={"name": "A"})
    body = res.json()
    assert body["valid"] is False
    assert body["field_errors"]["name"] == "Name must be at least 2 characters"
    assert "image_url" not in body["field_errors"]

    res = client.post("/api/v1/onboarding/validate", json=FORM)
    assert res.json() == {"valid": True, "field_errors": {}}


def test_wizard_navigation(client):
    state = client.post("/api/v1/onboarding/wizard/next", json={"current_step": 3}).json()
    assert state["current_step"] == 3
    state = client.post("/api/v1/onboarding/wizard/back", json=state).json()
    assert state["current_step"] == 2
    state = client.post("/api/v1/onboarding/wizard/back", json=state).json()
    state = client.post("/api/v1/onboarding/wizard/back", json=state).json()
    assert state["current_step"] == 1


def test_wizard_validate_current_step(client):
    res = client.post(
        "/api/v1/onboarding/wizard/validate",
        json={"current_step": 3, "values": {"fee_range": "$1"}},
    )
    assert res.json()["errors"] == {
        "fee_range": "Please select a valid fee range",
        "location": "Location is required",
    }


def test_wizard_rejects_step_out_of_range(client):
    res = client.post("/api/v1/onboarding/wizard/next", json={"current_step": 0})
    assert res.status_code == 422
