from fastapi import APIRouter, Request, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from showcase.config import settings
from showcase.database import get_db
from showcase.dependencies import get_current_user, get_viewer_id
from showcase.profanity import contains_profanity
from showcase.schemas import (
    ProjectCreate, ProjectUpdate, CommentCreate, CommentUpdate,
    FeedbackCreate, FeedbackUpdate, VisitCreate,
)
from showcase.serializers import (
    category_to_dict, project_to_dict, comment_to_dict, feedback_to_dict, visit_to_dict,
)
from showcase.services import Access
from showcase.services import feed, engagement, comments, feedback, stats, visits, categories
from showcase.services.timeframes import Timeframe

router = APIRouter(prefix="/api", tags=["api"])

# Columns that cannot be cleared once set
REQUIRED_PROJECT_FIELDS = ("title", "description")


def _raise_for_access(access: Access, what: str):
    if access == Access.NOT_FOUND:
        raise HTTPException(status_code=404, detail=f"{what} not found")
    if access == Access.FORBIDDEN:
        raise HTTPException(status_code=403, detail=f"Not authorized - you can only change your own {what.lower()}")


def _page_offset(page: int, limit: int) -> int:
    return (page - 1) * limit


# ==================== CATEGORIES ====================

@router.get("/categories")
async def get_categories(db: Session = Depends(get_db)):
    return [category_to_dict(c) for c in categories.list_categories(db)]


@router.post("/categories/init")
async def init_categories(db: Session = Depends(get_db)):
    created = categories.seed_default_categories(db)
    return {
        "message": "Categories initialized",
        "created": len(created),
        "categories": [category_to_dict(c) for c in created]
    }


# ==================== PROJECTS ====================

@router.get("/projects")
async def list_projects(
    request: Request,
    category_id: int | None = Query(None, alias="categoryId", gt=0),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    timeframe: Timeframe = Query(Timeframe.ALL),
    db: Session = Depends(get_db)
):
    viewer_id = await get_viewer_id(request, db)
    return feed.list_projects(
        db,
        category_id=category_id,
        limit=limit,
        offset=_page_offset(page, limit),
        timeframe=timeframe,
        viewer_id=viewer_id
    )


# Declared before /projects/{project_id} so "search" is not read as an id
@router.get("/projects/search")
async def search_projects(
    request: Request,
    q: str = Query(""),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
    db: Session = Depends(get_db)
):
    if not q.strip():
        raise HTTPException(status_code=400, detail="Search query is required")

    viewer_id = await get_viewer_id(request, db)
    return feed.search_projects(
        db,
        q.strip(),
        limit=limit,
        offset=_page_offset(page, limit),
        viewer_id=viewer_id
    )


@router.get("/projects/{project_id}")
async def get_project(project_id: int, request: Request, db: Session = Depends(get_db)):
    viewer_id = await get_viewer_id(request, db)
    project = feed.get_project(db, project_id, viewer_id)
    if not project:
        raise HTTPException(status_code=404, detail="Project not found")

    feed.increment_view_count(db, project_id)
    return project


@router.post("/projects", status_code=201)
async def create_project(body: ProjectCreate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    project = feed.create_project(db, user.id, body.model_dump())
    return project_to_dict(project, with_relations=False)


@router.put("/projects/{project_id}")
async def update_project(project_id: int, body: ProjectUpdate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)

    data = body.model_dump(exclude_unset=True)
    for field in REQUIRED_PROJECT_FIELDS:
        if field in data and data[field] is None:
            del data[field]

    access, project = feed.update_project(db, project_id, user.id, data)
    _raise_for_access(access, "Project")
    return project_to_dict(project, with_relations=False)


@router.delete("/projects/{project_id}")
async def delete_project(project_id: int, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    _raise_for_access(feed.delete_project(db, project_id, user.id), "Project")
    return {"message": "Project deleted successfully"}


@router.post("/projects/{project_id}/like")
async def toggle_like(project_id: int, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    result = engagement.toggle_like(db, project_id, user.id)
    if result is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return result


# ==================== COMMENTS ====================

@router.get("/projects/{project_id}/comments")
async def get_comments(project_id: int, db: Session = Depends(get_db)):
    return comments.get_comments(db, project_id)


@router.post("/projects/{project_id}/comments", status_code=201)
async def create_comment(project_id: int, body: CommentCreate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)

    if contains_profanity(body.content):
        raise HTTPException(status_code=400, detail="Comment contains inappropriate words")

    comment = comments.create_comment(db, project_id, user.id, body.content, body.parent_id)
    if comment is None:
        raise HTTPException(status_code=404, detail="Project not found")
    return comment_to_dict(comment, with_author=False)


@router.put("/comments/{comment_id}")
async def update_comment(comment_id: int, body: CommentUpdate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)

    if contains_profanity(body.content):
        raise HTTPException(status_code=400, detail="Comment contains inappropriate words")

    access, comment = comments.update_comment(db, comment_id, user.id, body.content)
    _raise_for_access(access, "Comment")
    return comment_to_dict(comment, with_author=False)


@router.delete("/comments/{comment_id}")
async def delete_comment(comment_id: int, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    _raise_for_access(comments.delete_comment(db, comment_id, user.id), "Comment")
    return {"message": "Comment deleted successfully"}


# ==================== FEEDBACK ====================

@router.get("/feedback")
async def get_feedback(db: Session = Depends(get_db)):
    return [feedback_to_dict(f) for f in feedback.list_feedback(db)]


@router.post("/feedback", status_code=201)
async def create_feedback(body: FeedbackCreate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    item = feedback.create_feedback(db, user.id, body.content, body.category)
    return feedback_to_dict(item, with_author=False)


@router.put("/feedback/{feedback_id}")
async def update_feedback(feedback_id: int, body: FeedbackUpdate, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    access, item = feedback.update_feedback(db, feedback_id, user.id, body.content, body.category)
    _raise_for_access(access, "Feedback")
    return feedback_to_dict(item, with_author=False)


@router.delete("/feedback/{feedback_id}")
async def delete_feedback(feedback_id: int, request: Request, db: Session = Depends(get_db)):
    user = await get_current_user(request, db)
    _raise_for_access(feedback.delete_feedback(db, feedback_id, user.id), "Feedback")
    return {"message": "Feedback deleted successfully"}


# ==================== VISITS & STATS ====================

@router.post("/visit", status_code=201)
async def record_visit(body: VisitCreate, request: Request, db: Session = Depends(get_db)):
    visit = visits.record_visit(
        db,
        body.session_id,
        user_agent=body.user_agent or request.headers.get("user-agent"),
        ip_address=request.client.host if request.client else None
    )
    return visit_to_dict(visit)


@router.get("/stats")
async def get_stats(db: Session = Depends(get_db)):
    return stats.get_stats(db)
