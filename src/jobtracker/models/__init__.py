from jobtracker.models.base import Base
from jobtracker.models.job import Job
from jobtracker.models.user import User, UserSession

__all__ = ["Base", "Job", "User", "UserSession"]
