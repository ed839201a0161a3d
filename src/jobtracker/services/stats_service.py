import uuid
from datetime import date

from sqlalchemy import extract, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtracker.models.job import Job
from jobtracker.schemas.job import JobStatus
from jobtracker.schemas.stats import DefaultStats, MonthlyApplication, StatsResponse

MONTHS_SHOWN = 8


def month_label(year: int, month: int) -> str:
    """Human-readable bucket label, e.g. ``"Mar 2026"``."""
    return date(year, month, 1).strftime("%b %Y")


async def count_by_status(db: AsyncSession, owner_id: uuid.UUID) -> DefaultStats:
    result = await db.execute(
        select(Job.job_status, func.count())
        .where(Job.owner_id == owner_id)
        .group_by(Job.job_status)
    )
    counts = {status: count for status, count in result.all()}
    return DefaultStats(**{status.value: counts.get(status.value, 0) for status in JobStatus})


async def monthly_applications(
    db: AsyncSession, owner_id: uuid.UUID, months: int = MONTHS_SHOWN
) -> list[MonthlyApplication]:
    """Counts for the most recent ``months`` creation months, oldest first.

    Months without any application are not filled in.
    """
    year = extract("year", Job.created_at)
    month = extract("month", Job.created_at)
    result = await db.execute(
        select(year, month, func.count())
        .where(Job.owner_id == owner_id)
        .group_by(year, month)
        .order_by(year.desc(), month.desc())
        .limit(months)
    )
    buckets = [
        MonthlyApplication(date=month_label(int(y), int(m)), count=count)
        for y, m, count in result.all()
    ]
    buckets.reverse()
    return buckets


async def get_stats(db: AsyncSession, owner_id: uuid.UUID) -> StatsResponse:
    return StatsResponse(
        default_stats=await count_by_status(db, owner_id),
        monthly_applications=await monthly_applications(db, owner_id),
    )
