"""
Echo response model.
Reflects what the backend saw of a request, for diagnostics.
"""
from pydantic import BaseModel, Field

ROOT_PATTERN = "/"
WILDCARD_PATTERN = "/**"


class EchoResponse(BaseModel):
    message: str
    timestamp: str
    pod_name: str = Field(..., alias="podName")
    path: str
    method: str

    class Config:
        frozen = True
        populate_by_name = True
