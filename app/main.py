import os
import time
from contextlib import asynccontextmanager
from datetime import datetime
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request

from .api.v1 import api_router
from .config import AppConfig, get_app_config
from .logging_config import log_api_access


def create_app(config: Optional[AppConfig] = None) -> FastAPI:
    app_config = config or get_app_config()

    @asynccontextmanager
    async def lifespan(_: FastAPI):
        app_config.logger.info(
            f"Server started at {datetime.now().isoformat()} "
            f"(pod={app_config.pod_name}, namespace={app_config.namespace})"
        )
        yield
        app_config.logger.info(f"Server stopped at {datetime.now().isoformat()}")

    # no docs/openapi routes: every path besides / and /health belongs to the echo wildcard
    application = FastAPI(title="Echo Backend", version="1.0.0", lifespan=lifespan,
                          docs_url=None, redoc_url=None, openapi_url=None)
    application.state.app_config = app_config
    application.include_router(api_router)

    @application.middleware("http")
    async def log_requests(request: Request, call_next):
        start_time = time.time()

        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, app_config.pod_name,
                           response.status_code, process_time)
            return response
        except Exception as e:
            process_time = time.time() - start_time
            log_api_access(request.method, request.url.path, app_config.pod_name,
                           500, process_time, error=str(e))
            app_config.logger.error(f"{request.method} {request.url.path} failed: {e} ({process_time:.3f}s)")
            raise

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8080")),
                log_config=None)
