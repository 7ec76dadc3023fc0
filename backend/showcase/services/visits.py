from datetime import datetime, timedelta

from sqlalchemy.orm import Session

from showcase.models import SiteVisit
from showcase.services.timeframes import start_of_day


def record_visit(
    db: Session,
    session_id: str,
    user_agent: str | None = None,
    ip_address: str | None = None,
    now: datetime | None = None,
) -> SiteVisit:
    """At most one visit per session per calendar day; a repeat returns the existing row"""
    now = now or datetime.utcnow()
    day_start = start_of_day(now)

    existing = db.query(SiteVisit).filter(
        SiteVisit.session_id == session_id,
        SiteVisit.visit_date >= day_start,
        SiteVisit.visit_date < day_start + timedelta(days=1)
    ).first()
    if existing:
        return existing

    visit = SiteVisit(
        session_id=session_id,
        user_agent=user_agent,
        ip_address=ip_address,
        visit_date=now
    )
    db.add(visit)
    db.commit()
    db.refresh(visit)
    return visit
