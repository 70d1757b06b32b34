import logging

from sqlalchemy import select
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from artistly import models
from artistly import sample_data

logger = logging.getLogger(__name__)


def _insert_missing(db: Session, model, rows: list[dict]) -> int:
    existing = set(db.scalars(select(model.id)))
    added = 0
    for row in rows:
        if row["id"] in existing:
            continue
        db.add(model(**row))
        added += 1
    return added


def seed_sample_data(engine: Engine) -> None:
    """Create tables and insert the sample catalog and booking requests.

    Rows that already exist (matched by id) are left untouched so a restart
    against a file-backed database never resets dashboard decisions.
    """

    models.Category.metadata.create_all(engine)
    with Session(engine) as db:
        counts = {
            "categories": _insert_missing(db, models.Category, sample_data.CATEGORIES),
            "artists": _insert_missing(db, models.Artist, sample_data.ARTISTS),
            "booking_requests": _insert_missing(
                db,
                models.BookingRequest,
                [
                    {**row, "status": models.RequestStatus(row["status"])}
                    for row in sample_data.BOOKING_REQUESTS
                ],
            ),
        }
        db.commit()
    logger.info("Seeded sample data %s", counts)
