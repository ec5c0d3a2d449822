"""
Health check response model.
Status, timestamp and pod identity for liveness/readiness probes.
"""
from pydantic import BaseModel, Field

class HealthResponse(BaseModel):
    status: str = "UP"
    timestamp: str
    pod_name: str = Field(..., alias="podName")
    namespace: str

    class Config:
        frozen = True
        populate_by_name = True
