import logging
import uuid

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.core.exceptions import BadRequestError, ForbiddenError, NotFoundError
from jobtracker.models.job import Job
from jobtracker.schemas.job import JobBase, JobCreate, JobStatus, JobUpdate, Priority
from jobtracker.services.job_query import JobQuery

logger = logging.getLogger(__name__)

PRIORITY_LEVELS: dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}


def priority_level(priority: str) -> int:
    """Numeric sort key for a priority label; High sorts first."""
    return PRIORITY_LEVELS.get(priority, PRIORITY_LEVELS[Priority.MEDIUM])


def _validate_job_fields(data: JobBase, fields_set: set[str] | None = None) -> None:
    if not data.position or not data.company:
        raise BadRequestError("Please provide position and company!")
    status_given = fields_set is None or "job_status" in fields_set
    if status_given and data.job_status == JobStatus.INTERVIEW and not data.interview_scheduled_at:
        raise BadRequestError("Please provide the interview date and time!")


def _ensure_owner(job: Job, user_id: uuid.UUID) -> None:
    if job.owner_id != user_id:
        logger.info("User %s denied access to job %s", user_id, job.id)
        raise ForbiddenError()


async def create_job(db: AsyncSession, owner_id: uuid.UUID, data: JobCreate) -> Job:
    _validate_job_fields(data)
    job = Job(
        **data.model_dump(),
        owner_id=owner_id,
        priority_level=priority_level(data.priority),
    )
    db.add(job)
    await db.flush()
    await db.refresh(job)
    logger.info("Job %s created by %s", job.id, owner_id)
    return job


async def get_job(db: AsyncSession, job_id: uuid.UUID) -> Job | None:
    result = await db.execute(select(Job).where(Job.id == job_id))
    return result.scalar_one_or_none()


async def get_owned_job(db: AsyncSession, job_id: uuid.UUID, user_id: uuid.UUID) -> Job:
    """Load a job for a write; 404 when missing, 403 when owned by someone else."""
    job = await get_job(db, job_id)
    if not job:
        raise NotFoundError("Job", str(job_id))
    _ensure_owner(job, user_id)
    return job


async def list_jobs(db: AsyncSession, query: JobQuery) -> tuple[list[Job], int]:
    count_query = select(func.count()).select_from(Job).where(*query.conditions)
    total = (await db.execute(count_query)).scalar_one()

    results = await db.execute(
        select(Job)
        .where(*query.conditions)
        .order_by(*query.order_by)
        .offset(query.skip)
        .limit(query.limit)
    )
    return list(results.scalars().all()), total


async def update_job(
    db: AsyncSession, user_id: uuid.UUID, job_id: uuid.UUID, data: JobUpdate
) -> Job:
    _validate_job_fields(data, data.model_fields_set)
    job = await get_owned_job(db, job_id, user_id)

    update_data = data.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(job, field, value)
    job.priority_level = priority_level(job.priority)

    await db.flush()
    await db.refresh(job)
    logger.info("Job %s updated by %s", job.id, user_id)
    return job


async def delete_job(db: AsyncSession, user_id: uuid.UUID, job_id: uuid.UUID) -> None:
    job = await get_owned_job(db, job_id, user_id)
    await db.delete(job)
    await db.flush()
    logger.info("Job %s deleted by %s", job_id, user_id)
