from pydantic import BaseModel


class HealthResponse(BaseModel):
    status: str
    database: str
    version: str


class LivenessResponse(BaseModel):
    status: str
