"""
Links API endpoints.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from planner.api.deps import get_trip_or_404
from planner.db import models, schemas
from planner.db.database import get_db
from planner.db.repositories import links as link_repo

router = APIRouter(prefix="/trips/{trip_id}/links", tags=["links"])


@router.post("", response_model=schemas.LinkCreated, status_code=status.HTTP_201_CREATED)
def create_link_endpoint(
    link: schemas.LinkCreate,
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    db_link = link_repo.create_link(db, db_trip.id, link)
    return schemas.LinkCreated(link_id=db_link.id)


@router.get("", response_model=schemas.LinkList)
def get_links_endpoint(
    db_trip: models.Trip = Depends(get_trip_or_404),
    db: Session = Depends(get_db),
):
    return {"links": link_repo.get_trip_links(db, db_trip.id)}
