from jobtracker.client.api import ApiError, JobTrackerClient
from jobtracker.client.reducer import reduce
from jobtracker.client.state import AppState
from jobtracker.client.store import Store

__all__ = ["ApiError", "AppState", "JobTrackerClient", "Store", "reduce"]
