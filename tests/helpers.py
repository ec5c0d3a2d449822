"""Shared setup for API tests."""

import shutil
import tempfile
import unittest
from datetime import datetime
from pathlib import Path

from fastapi.testclient import TestClient

from app.config import AppConfig, PodIdentity
from app.logging_config import LoggingConfig
from app.main import create_app


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


class ApiTestCase(unittest.TestCase):
    """Builds an app with a known pod identity and a throwaway log dir."""

    identity = PodIdentity(pod_name="echo-backend-7d9f-x2k4", namespace="staging")

    def setUp(self) -> None:
        self.log_dir = Path(tempfile.mkdtemp(prefix="echo_backend_test_"))
        self.addCleanup(shutil.rmtree, self.log_dir, ignore_errors=True)
        self.config = AppConfig(
            identity=self.identity,
            logging_config=LoggingConfig(logs_dir=str(self.log_dir), level="DEBUG"),
        )
        self.app = create_app(self.config)
        self.client = TestClient(self.app)
