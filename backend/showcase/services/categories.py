import logging

from sqlalchemy.orm import Session

from showcase.models import Category

logger = logging.getLogger(__name__)

DEFAULT_CATEGORIES = [
    {"name": "웹 개발", "slug": "web-dev", "description": "웹사이트 및 웹 애플리케이션"},
    {"name": "모바일 앱", "slug": "mobile-app", "description": "iOS, Android 앱"},
    {"name": "AI/ML", "slug": "ai-ml", "description": "인공지능 및 머신러닝"},
    {"name": "게임", "slug": "game", "description": "게임 개발"},
    {"name": "디자인", "slug": "design", "description": "UI/UX 디자인"},
    {"name": "도구", "slug": "tools", "description": "개발 도구 및 유틸리티"},
    {"name": "기타", "slug": "others", "description": "기타 프로젝트"},
]


def list_categories(db: Session) -> list[Category]:
    return db.query(Category).order_by(Category.name.asc()).all()


def create_category(db: Session, name: str, slug: str, description: str | None = None) -> Category:
    category = Category(name=name, slug=slug, description=description)
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


def seed_default_categories(db: Session) -> list[Category]:
    """Insert the default catalog; slugs that already exist are skipped"""
    existing = {slug for (slug,) in db.query(Category.slug).all()}
    created = []
    for entry in DEFAULT_CATEGORIES:
        if entry["slug"] in existing:
            logger.info("Category %s already exists", entry["slug"])
            continue
        created.append(create_category(db, **entry))
    return created
