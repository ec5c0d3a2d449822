"""
Logging configuration
"""

import logging
import logging.handlers
import os

from pathlib import Path


def parse_level(level: str) -> int:
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    return numeric_level


class LoggingConfig:
    """Logging configuration and management"""
    def __init__(self, logs_dir: str = None, level: str = None):
        self.logs_dir = Path(logs_dir or os.getenv("LOG_DIR", "logs"))
        self.level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
        self.level = parse_level(self.level_name)
        self.app_log_file = self.logs_dir / "echo_backend.log"
        self.error_log_file = self.logs_dir / "echo_backend_errors.log"
        self.access_log_file = self.logs_dir / "echo_backend_access.log"

    def setup_logging(self):
        """Setup logging configuration"""
        self.logs_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        root_logger.setLevel(logging.DEBUG)

        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)
            handler.close()
        formatter = logging.Formatter(
            fmt='%(asctime)s | %(name)s | %(levelname)s | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        console_handler = logging.StreamHandler()
        console_handler.setLevel(self.level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

        app_handler = logging.handlers.RotatingFileHandler(
            self.app_log_file,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        app_handler.setLevel(logging.DEBUG)
        app_handler.setFormatter(formatter)
        root_logger.addHandler(app_handler)

        error_handler = logging.handlers.RotatingFileHandler(
            self.error_log_file,
            maxBytes=5*1024*1024,
            backupCount=3,
            encoding='utf-8'
        )
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        root_logger.addHandler(error_handler)

        access_logger = logging.getLogger("access")
        access_logger.setLevel(logging.INFO)
        access_logger.propagate = False

        for handler in access_logger.handlers[:]:
            access_logger.removeHandler(handler)
            handler.close()

        access_handler = logging.handlers.RotatingFileHandler(
            self.access_log_file,
            maxBytes=10*1024*1024,
            backupCount=5,
            encoding='utf-8'
        )
        access_formatter = logging.Formatter(
            fmt='%(asctime)s | ACCESS | %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )
        access_handler.setFormatter(access_formatter)
        access_logger.addHandler(access_handler)

        # uvicorn writes through root; its own access lines duplicate ours
        for name in ("uvicorn", "uvicorn.error", "uvicorn.access"):
            lib_logger = logging.getLogger(name)
            lib_logger.handlers.clear()
            lib_logger.propagate = True
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

        return root_logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def log_api_access(method: str, path: str, pod_name: str = None, status_code: int = None,
                   response_time: float = None, error: str = None):
    access_logger = logging.getLogger("access")

    log_parts = [
        f"method={method}",
        f"path={path}",
        f"pod={pod_name or 'unknown'}",
        f"status={status_code or 'N/A'}",
    ]

    if response_time is not None:
        log_parts.append(f"response_time={response_time:.3f}s")

    if error:
        log_parts.append(f"error={error}")

    access_logger.info(" | ".join(log_parts))
