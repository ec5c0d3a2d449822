from app.models.echo import ROOT_PATTERN, WILDCARD_PATTERN, EchoResponse
from app.models.health import HealthResponse

__all__ = [
    "EchoResponse", "HealthResponse", "ROOT_PATTERN", "WILDCARD_PATTERN"
]
