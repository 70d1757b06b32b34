from artistly.crud import crud_booking_request
from artistly.models import RequestStatus


def test_pending_requests(client):
    res = client.get("/api/v1/booking-requests/", params={"status": "pending"})
    assert res.status_code == 200
    assert [r["id"] for r in res.json()] == ["1"]


def test_search_all_statuses(client):
    res = client.get("/api/v1/booking-requests/", params={"status": "all", "search": "chen"})
    assert [r["artist_name"] for r in res.json()] == ["Michael Chen"]


def test_default_lists_everything(client):
    res = client.get("/api/v1/booking-requests/")
    body = res.json()
    assert [r["id"] for r in body] == ["1", "2", "3"]
    assert body[0]["request_date"] == "2024-01-15"
    assert body[0]["status"] == "pending"


def test_invalid_status_filter(client):
    res = client.get("/api/v1/booking-requests/", params={"status": "archived"})
    assert res.status_code == 422
    assert any(err["loc"][-1] == "status" for err in res.json()["detail"])


def test_stats(client):
    res = client.get("/api/v1/booking-requests/stats")
    assert res.json() == {"total": 3, "pending": 1, "approved": 1, "rejected": 1}


def test_details(client):
    res = client.get("/api/v1/booking-requests/3/details")
    assert res.status_code == 200
    assert res.json() == {
        "id": "3",
        "artist_name": "Emma Rodriguez",
        "category": "Speakers",
        "location": "Miami, FL",
        "fee_range": "$1000-$2500",
        "status": "rejected",
        "request_date": "Jan 13, 2024",
    }


def test_approve(client, Session):
    res = client.post("/api/v1/booking-requests/1/approve")
    assert res.status_code == 200
    assert res.json()["status"] == "approved"

    db = Session()
    statuses = {r.id: r.status for r in crud_booking_request.get_booking_requests(db)}
    db.close()
    assert statuses == {
        "1": RequestStatus.APPROVED,
        "2": RequestStatus.APPROVED,
        "3": RequestStatus.REJECTED,
    }
    stats = client.get("/api/v1/booking-requests/stats").json()
    assert stats["pending"] == 0
    assert stats["approved"] == 2


def test_reject(client):
    res = client.post("/api/v1/booking-requests/1/reject")
    assert res.status_code == 200
    assert res.json()["status"] == "rejected"


def test_transition_on_decided_request_conflicts(client):
    res = client.post("/api/v1/booking-requests/2/reject")
    assert res.status_code == 409
    assert res.json()["detail"] == {
        "message": "Cannot update request in status: approved",
        "field_errors": {"status": "Invalid state"},
    }


def test_transition_missing_request(client):
    res = client.post("/api/v1/booking-requests/77/approve")
    assert res.status_code == 404
    assert res.json()["detail"]["field_errors"] == {"request_id": "Not found"}


def test_read_missing_request(client):
    assert client.get("/api/v1/booking-requests/77").status_code == 404
