from sqlalchemy import Column, String

from .base import BaseModel


class Category(BaseModel):
    __tablename__ = "categories"

    id = Column(String, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    description = Column(String, nullable=False, default="")
    icon = Column(String, nullable=False, default="")
