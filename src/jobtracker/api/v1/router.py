from fastapi import APIRouter

from jobtracker.api.v1 import auth, health, jobs

api_v1_router = APIRouter()
api_v1_router.include_router(health.router)
api_v1_router.include_router(auth.router)
api_v1_router.include_router(jobs.router)
