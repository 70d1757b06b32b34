from pydantic import BaseModel
from typing import List, Optional


class ArtistBase(BaseModel):
    name: str
    category: List[str]
    bio: str
    languages: List[str]
    fee_range: str
    location: str
    image_url: Optional[str] = None
    rating: Optional[float] = None
    experience: Optional[str] = None


class ArtistResponse(ArtistBase):
    id: str

    model_config = {"from_attributes": True}


class ArtistListResponse(BaseModel):
    """Filtered catalog page: ``count`` of ``total`` artists are visible."""

    data: List[ArtistResponse]
    total: int
    count: int
