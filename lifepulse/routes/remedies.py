"""
Defines the endpoints for the home remedy catalog.

The catalog is shared reference data; reading it does not require a session.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..repository import HealthRepository, get_repository

router = APIRouter(prefix="/home-remedies", tags=["Home Remedies"])


@router.get("", response_model=List[schemas.HomeRemedy])
def get_home_remedies(
    q: Optional[str] = None,
    repo: HealthRepository = Depends(get_repository),
):
    """Lists the catalog, optionally filtered by a search term."""
    if q:
        return repo.search_home_remedies(q)
    return repo.list_home_remedies()


@router.get("/{remedy_id}", response_model=schemas.HomeRemedy)
def get_home_remedy(remedy_id: int, repo: HealthRepository = Depends(get_repository)):
    remedy = repo.get_home_remedy(remedy_id)
    if remedy is None:
        raise HTTPException(status_code=404, detail="Home remedy not found")
    return remedy
