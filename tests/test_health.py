"""Tests for the /health endpoint."""

import os
import unittest
from unittest import mock

from fastapi.testclient import TestClient

from app.config import AppConfig, PodIdentity
from app.logging_config import LoggingConfig
from app.main import create_app
from tests.helpers import ApiTestCase, parse_timestamp


class TestHealthEndpoint(ApiTestCase):
    """Tests for /health endpoint."""

    def test_health_check_returns_200(self) -> None:
        """Health check returns 200 OK with JSON."""
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.headers["content-type"].startswith("application/json"))

    def test_health_check_reports_up(self) -> None:
        """Status is always UP."""
        data = self.client.get("/health").json()
        self.assertEqual(data["status"], "UP")

    def test_health_check_reports_identity(self) -> None:
        """Pod name and namespace come from the configured identity."""
        data = self.client.get("/health").json()
        self.assertEqual(data["podName"], "echo-backend-7d9f-x2k4")
        self.assertEqual(data["namespace"], "staging")

    def test_health_check_has_exact_fields(self) -> None:
        """Response carries only the health fields, camelCased."""
        data = self.client.get("/health").json()
        self.assertEqual(set(data), {"status", "timestamp", "podName", "namespace"})

    def test_health_timestamps_are_iso_and_non_decreasing(self) -> None:
        """Sequential timestamps parse as ISO-8601 and never go backwards."""
        first = parse_timestamp(self.client.get("/health").json()["timestamp"])
        second = parse_timestamp(self.client.get("/health").json()["timestamp"])
        self.assertIsNotNone(first.tzinfo)
        self.assertLessEqual(first, second)


class TestHealthDefaults(unittest.TestCase):
    """Tests for identity defaults when the environment is empty."""

    def test_defaults_when_env_unset(self) -> None:
        """Unset POD_NAME and NAMESPACE fall back to unknown/default."""
        log_dir = os.environ["LOG_DIR"]
        with mock.patch.dict(os.environ, {}, clear=True):
            identity = PodIdentity.from_env()
        config = AppConfig(identity=identity, logging_config=LoggingConfig(logs_dir=log_dir, level="INFO"))
        client = TestClient(create_app(config))

        data = client.get("/health").json()
        self.assertEqual(data["podName"], "unknown")
        self.assertEqual(data["namespace"], "default")

        data = client.get("/").json()
        self.assertEqual(data["podName"], "unknown")


if __name__ == "__main__":
    unittest.main()
