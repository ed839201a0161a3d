"""Translate the job list filters into a SQL predicate, ordering and page window."""

import math
import uuid
from dataclasses import dataclass

from sqlalchemy import ColumnElement, UnaryExpression

from jobtracker.models.job import Job
from jobtracker.schemas.job import SortOption

ALL = "all"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100
# Largest OFFSET a signed 64-bit bind parameter can carry
MAX_OFFSET = 2**63 - 1
LIKE_ESCAPE = "\\"


_SORT_KEYS: dict[SortOption, UnaryExpression] = {
    SortOption.LATEST: Job.created_at.desc(),
    SortOption.OLDEST: Job.created_at.asc(),
    SortOption.A_Z: Job.position.asc(),
    SortOption.Z_A: Job.position.desc(),
    SortOption.PRIORITY_HIGH: Job.priority_level.asc(),
    SortOption.PRIORITY_LOW: Job.priority_level.desc(),
}


@dataclass(frozen=True)
class JobQuery:
    conditions: tuple[ColumnElement[bool], ...]
    sort: SortOption
    page: int
    limit: int

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @property
    def order_by(self) -> tuple[UnaryExpression, ...]:
        # id breaks ties so equal sort keys paginate deterministically
        return (_SORT_KEYS[self.sort], Job.id.asc())

    def num_of_pages(self, total: int) -> int:
        return math.ceil(total / self.limit)


def coerce_positive_int(value: object, default: int) -> int:
    """Return ``value`` as a positive int, or ``default`` when it is not one."""
    try:
        number = int(str(value).strip())
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def clamp_window(page: int, limit: int) -> tuple[int, int]:
    """Cap ``limit`` and keep the resulting offset within range."""
    limit = min(limit, MAX_LIMIT)
    page = min(page, MAX_OFFSET // limit + 1)
    return page, limit


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the search term matches literally."""
    return (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def _is_filter(value: str | None) -> bool:
    return bool(value and value.strip()) and value.strip() != ALL


def build_job_query(
    owner_id: uuid.UUID,
    *,
    search: str | None = None,
    job_type: str | None = None,
    job_status: str | None = None,
    sort: str | None = None,
    page: object = None,
    limit: object = None,
) -> JobQuery:
    conditions: list[ColumnElement[bool]] = [Job.owner_id == owner_id]

    if search and search.strip():
        pattern = f"%{escape_like(search.strip())}%"
        conditions.append(Job.position.ilike(pattern, escape=LIKE_ESCAPE))
    if _is_filter(job_type):
        conditions.append(Job.job_type == job_type.strip())
    if _is_filter(job_status):
        conditions.append(Job.job_status == job_status.strip())

    page, limit = clamp_window(
        coerce_positive_int(page, DEFAULT_PAGE),
        coerce_positive_int(limit, DEFAULT_LIMIT),
    )
    return JobQuery(
        conditions=tuple(conditions),
        sort=SortOption.parse(sort),
        page=page,
        limit=limit,
    )
