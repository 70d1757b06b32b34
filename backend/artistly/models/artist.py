from sqlalchemy import Column, Float, JSON, String, Text

from .base import BaseModel


class Artist(BaseModel):
    """A performer listed in the catalog."""

    __tablename__ = "artists"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, nullable=False)
    # Category and language names; an artist may perform in several categories
    category = Column(JSON, nullable=False, default=list)
    bio = Column(Text, nullable=False, default="")
    languages = Column(JSON, nullable=False, default=list)
    fee_range = Column(String, nullable=False, index=True)
    location = Column(String, nullable=False, index=True)
    image_url = Column(String, nullable=True)
    rating = Column(Float, nullable=True)
    experience = Column(String, nullable=True)
