from datetime import datetime, timedelta

from sqlalchemy import func
from sqlalchemy.orm import Session

from showcase.models import Project, User, SiteVisit
from showcase.services.timeframes import start_of_day


def get_stats(db: Session, now: datetime | None = None) -> dict:
    """Dashboard counters, recomputed on every call"""
    now = now or datetime.utcnow()

    total_projects, total_likes, total_views = db.query(
        func.count(Project.id),
        func.coalesce(func.sum(Project.like_count), 0),
        func.coalesce(func.sum(Project.view_count), 0)
    ).filter(Project.is_active == True).one()

    total_users = db.query(func.count(User.id)).scalar() or 0

    day_start = start_of_day(now)
    today_visits = db.query(func.count(SiteVisit.session_id.distinct())).filter(
        SiteVisit.visit_date >= day_start,
        SiteVisit.visit_date < day_start + timedelta(days=1)
    ).scalar() or 0

    return {
        "total_projects": total_projects or 0,
        "total_users": total_users,
        "today_visits": today_visits,
        "total_likes": int(total_likes or 0),
        "total_views": int(total_views or 0),
    }
