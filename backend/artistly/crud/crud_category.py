from sqlalchemy.orm import Session

from ..models.category import Category


def get_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.id).all()


def get_category(db: Session, category_id: str) -> Category | None:
    return db.query(Category).filter(Category.id == category_id).first()
