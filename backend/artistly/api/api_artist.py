import logging
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..crud import crud_artist
from ..database import get_db
from ..schemas.artist import ArtistListResponse, ArtistResponse
from ..services.catalog_filter import filter_artists
from ..utils import not_found

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/", response_model=ArtistListResponse)
def list_artists(
    category: List[str] = Query(default=[]),
    location: List[str] = Query(default=[]),
    fee_range: List[str] = Query(default=[]),
    db: Session = Depends(get_db),
):
    """List catalog artists narrowed by category, location and fee range.

    Each parameter may be repeated; values of one parameter are alternatives,
    different parameters must all match.
    """
    artists = crud_artist.get_artists(db)
    visible = filter_artists(
        artists,
        categories=category,
        locations=location,
        fee_ranges=fee_range,
    )
    logger.debug(
        "Artist filter category=%s location=%s fee_range=%s -> %d/%d",
        category,
        location,
        fee_range,
        len(visible),
        len(artists),
    )
    return {"data": visible, "total": len(artists), "count": len(visible)}


@router.get("/{artist_id}", response_model=ArtistResponse)
def read_artist(artist_id: str, db: Session = Depends(get_db)):
    artist = crud_artist.get_artist(db, artist_id)
    if artist is None:
        raise not_found("Artist", "artist_id")
    return artist
