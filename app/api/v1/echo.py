"""
Echo endpoints.
Root greeting plus catch-all GET/POST handlers that reflect query params or body.
Wildcard responses report the route pattern, not the requested path.
"""
from fastapi import APIRouter, Depends, Request

from app.config import AppConfig, app_config_dependency
from app.models import ROOT_PATTERN, WILDCARD_PATTERN, EchoResponse
from app.utils import body_text, current_timestamp, format_params

GREETING = "Hello from Python FastAPI Backend!"

root_router = APIRouter()
wildcard_router = APIRouter()


@root_router.get("/", response_model=EchoResponse)
async def root(config: AppConfig = Depends(app_config_dependency)) -> EchoResponse:
    return EchoResponse(
        message=GREETING,
        timestamp=current_timestamp(),
        pod_name=config.pod_name,
        path=ROOT_PATTERN,
        method="GET",
    )


@wildcard_router.get("/{full_path:path}", response_model=EchoResponse)
async def echo_get(
    full_path: str,
    request: Request,
    config: AppConfig = Depends(app_config_dependency)
) -> EchoResponse:
    # duplicate keys: last value wins
    params = dict(request.query_params)
    config.logger.debug(f"GET echo for /{full_path} with {len(params)} params")
    return EchoResponse(
        message=f"Echo response with params: {format_params(params)}",
        timestamp=current_timestamp(),
        pod_name=config.pod_name,
        path=WILDCARD_PATTERN,
        method="GET",
    )


@wildcard_router.post("/{full_path:path}", response_model=EchoResponse)
async def echo_post(
    full_path: str,
    request: Request,
    config: AppConfig = Depends(app_config_dependency)
) -> EchoResponse:
    body = body_text(await request.body())
    config.logger.debug(f"POST echo for /{full_path} with {'no' if body is None else len(body)} body chars")
    return EchoResponse(
        message=f"Echo POST with body: {body if body is not None else 'empty'}",
        timestamp=current_timestamp(),
        pod_name=config.pod_name,
        path=WILDCARD_PATTERN,
        method="POST",
    )
