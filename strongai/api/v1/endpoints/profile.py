"""Goal settings (single user profile)."""

from fastapi import APIRouter, Depends

from strongai.api.deps import get_store
from strongai.schemas.profile import UserProfile
from strongai.services.store import FitnessStore

router = APIRouter()


@router.get("", response_model=UserProfile)
async def get_profile(store: FitnessStore = Depends(get_store)):
    """Return the profile, creating the default one on first access."""
    return await store.ensure_profile()


@router.put("", response_model=UserProfile)
async def update_profile(payload: UserProfile, store: FitnessStore = Depends(get_store)):
    return await store.update_profile(payload)
