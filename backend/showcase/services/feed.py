"""Ranked project listings.

Every listing is ordered by like_count, then created_at, then id, all
descending, and only ever contains active projects.
"""
import logging
from datetime import datetime

from sqlalchemy import or_
from sqlalchemy.orm import Session, joinedload

from showcase.models import Project, Like
from showcase.serializers import project_to_dict
from showcase.services.results import Access
from showcase.services.timeframes import Timeframe, timeframe_lower_bound

logger = logging.getLogger(__name__)

# Columns a caller may set on create/update; counters and flags are never taken from input
EDITABLE_FIELDS = (
    "title", "description", "content", "image_url", "video_url",
    "demo_url", "contact_info", "category_id",
)


def _active_projects(db: Session):
    return db.query(Project).options(
        joinedload(Project.author),
        joinedload(Project.category)
    ).filter(Project.is_active == True)


def _ranked(query):
    return query.order_by(
        Project.like_count.desc(),
        Project.created_at.desc(),
        Project.id.desc()
    )


def _liked_project_ids(db: Session, project_ids: list[int], viewer_id: str | None) -> set[int]:
    if not viewer_id or not project_ids:
        return set()
    rows = db.query(Like.project_id).filter(
        Like.user_id == viewer_id,
        Like.project_id.in_(project_ids)
    ).all()
    return {row[0] for row in rows}


def _enrich(db: Session, projects: list[Project], viewer_id: str | None) -> list[dict]:
    liked = _liked_project_ids(db, [p.id for p in projects], viewer_id)
    return [project_to_dict(p, is_liked=p.id in liked) for p in projects]


def list_projects(
    db: Session,
    category_id: int | None = None,
    limit: int = 20,
    offset: int = 0,
    timeframe: Timeframe | str = Timeframe.ALL,
    viewer_id: str | None = None,
    now: datetime | None = None,
) -> list[dict]:
    """Active projects inside the timeframe window, ranked and paginated.

    Each entry carries its author, its category (or None) and ``is_liked``
    for the viewer (always False for anonymous viewers).
    """
    bound = timeframe_lower_bound(timeframe, now)

    query = _active_projects(db)
    if category_id:
        query = query.filter(Project.category_id == category_id)
    if bound is not None:
        query = query.filter(Project.created_at >= bound)

    projects = _ranked(query).offset(offset).limit(limit).all()
    return _enrich(db, projects, viewer_id)


def search_projects(
    db: Session,
    query: str,
    limit: int = 20,
    offset: int = 0,
    viewer_id: str | None = None,
) -> list[dict]:
    """Case-insensitive substring match on title or description, same ranking as list_projects.

    ``%`` and ``_`` in the query are matched literally.
    """
    projects = _ranked(
        _active_projects(db).filter(
            or_(
                Project.title.icontains(query, autoescape=True),
                Project.description.icontains(query, autoescape=True)
            )
        )
    ).offset(offset).limit(limit).all()
    return _enrich(db, projects, viewer_id)


def get_project(db: Session, project_id: int, viewer_id: str | None = None) -> dict | None:
    project = _active_projects(db).filter(Project.id == project_id).first()
    if not project:
        return None
    return _enrich(db, [project], viewer_id)[0]


def increment_view_count(db: Session, project_id: int) -> int:
    """Bump view_count in the database. Unknown ids are a no-op; returns affected rows."""
    updated = db.query(Project).filter(Project.id == project_id).update(
        {Project.view_count: Project.view_count + 1},
        synchronize_session=False
    )
    db.commit()
    return updated


def create_project(db: Session, author_id: str, data: dict) -> Project:
    project = Project(
        author_id=author_id,
        **{field: data.get(field) for field in EDITABLE_FIELDS}
    )
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("Project %s created by %s", project.id, author_id)
    return project


def _owned_project(db: Session, project_id: int, user_id: str) -> tuple[Access, Project | None]:
    project = db.query(Project).filter(
        Project.id == project_id,
        Project.is_active == True
    ).first()
    if not project:
        return Access.NOT_FOUND, None
    if project.author_id != user_id:
        return Access.FORBIDDEN, None
    return Access.OK, project


def update_project(db: Session, project_id: int, user_id: str, data: dict) -> tuple[Access, Project | None]:
    """Apply the editable fields present in ``data``; only the author may edit"""
    access, project = _owned_project(db, project_id, user_id)
    if access != Access.OK:
        return access, None

    for field in EDITABLE_FIELDS:
        if field in data:
            setattr(project, field, data[field])
    project.updated_at = datetime.utcnow()

    db.commit()
    db.refresh(project)
    return Access.OK, project


def delete_project(db: Session, project_id: int, user_id: str) -> Access:
    """Soft delete: the row stays for the likes and comments pointing at it"""
    access, project = _owned_project(db, project_id, user_id)
    if access != Access.OK:
        return access

    project.is_active = False
    db.commit()
    logger.info("Project %s deactivated by %s", project_id, user_id)
    return Access.OK
