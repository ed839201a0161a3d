import uuid

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.api.deps import get_current_user, get_db
from jobtracker.models.user import User
from jobtracker.schemas import MessageResponse
from jobtracker.schemas.job import (
    JobCreate,
    JobCreatedResponse,
    JobListResponse,
    JobRead,
    JobUpdate,
    JobUpdatedResponse,
)
from jobtracker.schemas.stats import StatsResponse
from jobtracker.services import job_service, stats_service
from jobtracker.services.job_query import build_job_query

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobCreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_job(
    data: JobCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> JobCreatedResponse:
    job = await job_service.create_job(db, user.id, data)
    return JobCreatedResponse(job=JobRead.model_validate(job))


@router.get("", response_model=JobListResponse)
async def list_jobs(
    page: str | None = Query(None),
    limit: str | None = Query(None),
    search: str | None = Query(None),
    job_type: str | None = Query(None, alias="jobType"),
    job_status: str | None = Query(None, alias="jobStatus"),
    sort: str | None = Query(None),
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> JobListResponse:
    query = build_job_query(
        user.id,
        search=search,
        job_type=job_type,
        job_status=job_status,
        sort=sort,
        page=page,
        limit=limit,
    )
    items, total = await job_service.list_jobs(db, query)
    return JobListResponse(
        jobs=[JobRead.model_validate(j) for j in items],
        total_jobs=total,
        num_of_pages=query.num_of_pages(total),
    )


@router.get("/stats", response_model=StatsResponse)
async def show_stats(
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> StatsResponse:
    return await stats_service.get_stats(db, user.id)


@router.patch("/{job_id}", response_model=JobUpdatedResponse)
async def update_job(
    job_id: uuid.UUID,
    data: JobUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> JobUpdatedResponse:
    updated = await job_service.update_job(db, user.id, job_id, data)
    return JobUpdatedResponse(updated_job=JobRead.model_validate(updated))


@router.delete("/{job_id}", response_model=MessageResponse)
async def delete_job(
    job_id: uuid.UUID,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
) -> MessageResponse:
    await job_service.delete_job(db, user.id, job_id)
    return MessageResponse(message="The job has been deleted!")
