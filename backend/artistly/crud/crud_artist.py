from sqlalchemy.orm import Session

from ..models.artist import Artist


def get_artists(db: Session) -> list[Artist]:
    return db.query(Artist).order_by(Artist.id).all()


def get_artist(db: Session, artist_id: str) -> Artist | None:
    return db.query(Artist).filter(Artist.id == artist_id).first()
