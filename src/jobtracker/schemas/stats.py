from pydantic import BaseModel

from jobtracker.schemas import StatusResponse


class DefaultStats(BaseModel):
    pending: int = 0
    interview: int = 0
    declined: int = 0


class MonthlyApplication(BaseModel):
    date: str
    count: int


class StatsResponse(StatusResponse):
    default_stats: DefaultStats
    monthly_applications: list[MonthlyApplication]
