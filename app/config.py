import os

from fastapi import Request
from pydantic import BaseModel

from .logging_config import LoggingConfig, get_logger


class PodIdentity(BaseModel):
    """Pod name and namespace, resolved once at startup"""
    pod_name: str = "unknown"
    namespace: str = "default"

    @classmethod
    def from_env(cls) -> "PodIdentity":
        return cls(
            pod_name=os.getenv("POD_NAME", "unknown"),
            namespace=os.getenv("NAMESPACE", "default"),
        )

    class Config:
        frozen = True


class AppConfig:
    def __init__(self, identity: PodIdentity = None, logging_config: LoggingConfig = None):
        self.identity = identity or PodIdentity.from_env()
        self.logging_config = logging_config or LoggingConfig()

        self.logging_config.setup_logging()
        self.logger = get_logger(__name__)

    @property
    def pod_name(self) -> str:
        return self.identity.pod_name

    @property
    def namespace(self) -> str:
        return self.identity.namespace


_app_config = None

def get_app_config() -> AppConfig:
    global _app_config
    if _app_config is None:
        _app_config = AppConfig()
    return _app_config


def app_config_dependency(request: Request) -> AppConfig:
    """Config the running application was built with"""
    return request.app.state.app_config
