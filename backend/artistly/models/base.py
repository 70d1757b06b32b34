from sqlalchemy import Column, DateTime
from sqlalchemy.sql import func

from ..database import Base


class BaseModel(Base):
    """Declarative base carrying row bookkeeping timestamps."""

    __abstract__ = True

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())
