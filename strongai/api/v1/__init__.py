"""API v1 router aggregation."""

from fastapi import APIRouter

from strongai.api.v1.endpoints import (
    analytics,
    exercises,
    health,
    measurements,
    profile,
    routines,
    timer,
    widgets,
    workouts,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(exercises.router, prefix="/exercises", tags=["exercises"])
api_router.include_router(workouts.router, prefix="/workouts", tags=["workouts"])
api_router.include_router(timer.router, prefix="/timer", tags=["timer"])
api_router.include_router(routines.router, prefix="/routines", tags=["routines"])
api_router.include_router(measurements.router, prefix="/measurements", tags=["measurements"])
api_router.include_router(widgets.router, prefix="/widgets", tags=["widgets"])
api_router.include_router(profile.router, prefix="/profile", tags=["profile"])
api_router.include_router(analytics.router, prefix="/analytics", tags=["analytics"])
