#!/usr/bin/env python3
"""
Seed the default project categories.
Safe to run more than once: existing slugs are skipped.

Usage:
    cd backend
    python scripts/seed_categories.py
"""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from showcase.database import SessionLocal, engine, Base
from showcase import models  # noqa: F401
from showcase.services.categories import seed_default_categories

def seed():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()

    try:
        created = seed_default_categories(db)
        for category in created:
            print(f"Created category: {category.slug} ({category.name})")
        print(f"\nSeeding complete: {len(created)} new categories")
    except Exception as e:
        db.rollback()
        print(f"Seeding failed: {e}")
        raise
    finally:
        db.close()

if __name__ == "__main__":
    print("Category seeding")
    print("=" * 40)
    seed()
