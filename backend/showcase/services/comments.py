import logging
from datetime import datetime

from sqlalchemy.orm import Session, joinedload

from showcase.models import Project, Comment
from showcase.serializers import comment_to_dict
from showcase.services.results import Access

logger = logging.getLogger(__name__)


def get_comments(db: Session, project_id: int) -> list[dict]:
    """Active comments of a project as a two-level tree, newest first.

    Only replies to a root comment are kept. Replies to replies, and replies
    whose root is missing or inactive, are left out of the result.
    """
    rows = db.query(Comment).options(joinedload(Comment.author)).filter(
        Comment.project_id == project_id,
        Comment.is_active == True
    ).order_by(Comment.created_at.desc(), Comment.id.desc()).all()

    roots = []
    roots_by_id = {}
    replies = []
    for comment in rows:
        if comment.parent_id is None:
            node = comment_to_dict(comment)
            node["replies"] = []
            roots.append(node)
            roots_by_id[comment.id] = node
        else:
            replies.append(comment)

    # rows are already newest first, so each reply list comes out in the same order
    for reply in replies:
        root = roots_by_id.get(reply.parent_id)
        if root is not None:
            root["replies"].append(comment_to_dict(reply))

    return roots


def create_comment(
    db: Session,
    project_id: int,
    author_id: str,
    content: str,
    parent_id: int | None = None,
) -> Comment | None:
    """Add a comment or reply and bump the project's comment_count.

    Returns None if there is no active project with that id. ``parent_id``
    is stored as given.
    """
    project_exists = db.query(Project.id).filter(
        Project.id == project_id,
        Project.is_active == True
    ).first()
    if not project_exists:
        return None

    comment = Comment(
        project_id=project_id,
        author_id=author_id,
        content=content,
        parent_id=parent_id
    )
    db.add(comment)
    db.query(Project).filter(Project.id == project_id).update(
        {Project.comment_count: Project.comment_count + 1},
        synchronize_session=False
    )
    db.commit()
    db.refresh(comment)
    return comment


def _owned_comment(db: Session, comment_id: int, user_id: str) -> tuple[Access, Comment | None]:
    comment = db.query(Comment).filter(
        Comment.id == comment_id,
        Comment.is_active == True
    ).first()
    if not comment:
        return Access.NOT_FOUND, None
    if comment.author_id != user_id:
        return Access.FORBIDDEN, None
    return Access.OK, comment


def update_comment(db: Session, comment_id: int, user_id: str, content: str) -> tuple[Access, Comment | None]:
    access, comment = _owned_comment(db, comment_id, user_id)
    if access != Access.OK:
        return access, None

    comment.content = content
    comment.updated_at = datetime.utcnow()
    db.commit()
    db.refresh(comment)
    return Access.OK, comment


def delete_comment(db: Session, comment_id: int, user_id: str) -> Access:
    """Soft delete; comment_count always equals the number of active comments"""
    access, comment = _owned_comment(db, comment_id, user_id)
    if access != Access.OK:
        return access

    comment.is_active = False
    db.query(Project).filter(
        Project.id == comment.project_id,
        Project.comment_count > 0
    ).update(
        {Project.comment_count: Project.comment_count - 1},
        synchronize_session=False
    )
    db.commit()
    logger.info("Comment %s deactivated by %s", comment_id, user_id)
    return Access.OK
