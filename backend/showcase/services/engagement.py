import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from showcase.models import Project, Like

logger = logging.getLogger(__name__)


def is_project_liked(db: Session, project_id: int, user_id: str) -> bool:
    return db.query(Like.id).filter(
        Like.project_id == project_id,
        Like.user_id == user_id
    ).first() is not None


def _stored_like_count(db: Session, project_id: int) -> int:
    return db.query(Project.like_count).filter(Project.id == project_id).scalar() or 0


def _bump_like_count(db: Session, project_id: int, delta: int):
    db.query(Project).filter(Project.id == project_id).update(
        {Project.like_count: Project.like_count + delta},
        synchronize_session=False
    )


def toggle_like(db: Session, project_id: int, user_id: str) -> dict | None:
    """Like or unlike a project for a user.

    The Like row and the project's like_count change in one commit. If a
    concurrent request from the same user got there first (unique constraint
    on insert, no row left to delete on unlike), like_count is not touched
    and the stored state is reported instead.

    Returns ``{"liked", "like_count"}`` or None when the project does not
    exist or is inactive.
    """
    project_exists = db.query(Project.id).filter(
        Project.id == project_id,
        Project.is_active == True
    ).first()
    if not project_exists:
        return None

    if is_project_liked(db, project_id, user_id):
        removed = db.query(Like).filter(
            Like.project_id == project_id,
            Like.user_id == user_id
        ).delete(synchronize_session=False)
        if removed:
            _bump_like_count(db, project_id, -1)
        else:
            logger.warning("Like on project %s by %s was already removed", project_id, user_id)
        db.commit()
        return {"liked": False, "like_count": _stored_like_count(db, project_id)}

    try:
        db.add(Like(project_id=project_id, user_id=user_id))
        db.flush()
        _bump_like_count(db, project_id, 1)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("Concurrent like toggle on project %s by %s", project_id, user_id)

    return {"liked": is_project_liked(db, project_id, user_id), "like_count": _stored_like_count(db, project_id)}
