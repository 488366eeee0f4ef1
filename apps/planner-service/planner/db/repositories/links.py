"""
Link repository functions.
"""
from __future__ import annotations

import uuid
from typing import List
from sqlalchemy.orm import Session

from planner.db import models, schemas


def create_link(db: Session, trip_id: uuid.UUID, link: schemas.LinkCreate) -> models.Link:
    db_link = models.Link(trip_id=trip_id, title=link.title, url=link.url)
    try:
        db.add(db_link)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_link)
    return db_link


def get_trip_links(db: Session, trip_id: uuid.UUID) -> List[models.Link]:
    return (
        db.query(models.Link)
        .filter(models.Link.trip_id == trip_id)
        .order_by(models.Link.title.asc())
        .all()
    )
