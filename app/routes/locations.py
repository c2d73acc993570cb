"""
Location endpoints - state and district options for the submission form.
"""

from typing import Dict, List

from fastapi import APIRouter

from app.services.location_service import list_districts, list_states

router = APIRouter(prefix="/api", tags=["Locations"])


@router.get("/states", response_model=List[Dict[str, str]])
async def get_states():
    return list_states()


@router.get("/districts/{state_key}", response_model=List[Dict[str, str]])
async def get_districts(state_key: str):
    """Districts of a state; unknown state keys return []."""
    return list_districts(state_key)
