from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from artistly.crud import crud_artist, crud_booking_request, crud_category
from artistly.db_utils import seed_sample_data
from artistly.models import RequestStatus


def setup_engine():
    return create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )


def test_seed_creates_sample_rows():
    engine = setup_engine()
    seed_sample_data(engine)
    db = sessionmaker(bind=engine)()
    assert len(crud_category.get_categories(db)) == 4
    assert len(crud_artist.get_artists(db)) == 6
    priya = crud_artist.get_artist(db, "5")
    assert priya.category == ["Singers", "Dancers"]
    assert priya.rating == 4.8
    requests = crud_booking_request.get_booking_requests(db)
    assert [r.status for r in requests] == [
        RequestStatus.PENDING,
        RequestStatus.APPROVED,
        RequestStatus.REJECTED,
    ]


def test_reseeding_keeps_decisions():
    engine = setup_engine()
    seed_sample_data(engine)
    db = sessionmaker(bind=engine)()
    request = crud_booking_request.get_booking_request(db, "1")
    crud_booking_request.update_booking_request_status(db, request, RequestStatus.APPROVED)
    db.close()

    seed_sample_data(engine)

    db = sessionmaker(bind=engine)()
    assert crud_booking_request.get_booking_request(db, "1").status == RequestStatus.APPROVED
    assert len(crud_booking_request.get_booking_requests(db)) == 3
