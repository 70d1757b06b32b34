import logging
import pytest
from fastapi import HTTPException

from artistly.utils.errors import error_response, not_found


def test_error_response_logs(caplog):
    caplog.set_level(logging.WARNING, logger="artistly.utils.errors")
    with pytest.raises(HTTPException) as exc:
        raise error_response("Invalid", {"field": "bad"})
    assert exc.value.status_code == 422
    assert exc.value.detail == {"message": "Invalid", "field_errors": {"field": "bad"}}
    assert any(
        "Invalid" in r.getMessage() and "'field': 'bad'" in r.getMessage()
        for r in caplog.records
    )


def test_server_errors_log_at_error_level(caplog):
    caplog.set_level(logging.WARNING, logger="artistly.utils.errors")
    error_response("Backend down", {}, 503)
    assert [r.levelno for r in caplog.records] == [logging.ERROR]


def test_not_found_shape():
    exc = not_found("Artist", "artist_id")
    assert exc.status_code == 404
    assert exc.detail == {"message": "Artist not found", "field_errors": {"artist_id": "Not found"}}
