from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from showcase.models import Feedback, FEEDBACK_CATEGORIES
from showcase.services.results import Access


def _check_category(category: str):
    if category not in FEEDBACK_CATEGORIES:
        raise ValueError(f"Unknown feedback category: {category!r}")


def list_feedback(db: Session) -> list[Feedback]:
    return db.query(Feedback).options(joinedload(Feedback.author)).filter(
        Feedback.is_active == True
    ).order_by(Feedback.created_at.desc(), Feedback.id.desc()).all()


def create_feedback(db: Session, author_id: str, content: str, category: str) -> Feedback:
    _check_category(category)
    feedback = Feedback(author_id=author_id, content=content, category=category)
    db.add(feedback)
    db.commit()
    db.refresh(feedback)
    return feedback


def _owned_feedback(db: Session, feedback_id: int, user_id: str) -> tuple[Access, Feedback | None]:
    feedback = db.query(Feedback).filter(
        Feedback.id == feedback_id,
        Feedback.is_active == True
    ).first()
    if not feedback:
        return Access.NOT_FOUND, None
    if feedback.author_id != user_id:
        return Access.FORBIDDEN, None
    return Access.OK, feedback


def update_feedback(
    db: Session,
    feedback_id: int,
    user_id: str,
    content: str | None = None,
    category: str | None = None,
) -> tuple[Access, Feedback | None]:
    if category is not None:
        _check_category(category)

    access, feedback = _owned_feedback(db, feedback_id, user_id)
    if access != Access.OK:
        return access, None

    if content is not None:
        feedback.content = content
    if category is not None:
        feedback.category = category
    feedback.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(feedback)
    return Access.OK, feedback


def delete_feedback(db: Session, feedback_id: int, user_id: str) -> Access:
    access, feedback = _owned_feedback(db, feedback_id, user_id)
    if access != Access.OK:
        return access

    feedback.is_active = False
    db.commit()
    return Access.OK
