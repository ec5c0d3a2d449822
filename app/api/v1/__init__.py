from fastapi import APIRouter
from app.api.v1.echo import root_router, wildcard_router
from app.api.v1.health import router as health_router

# Order matters: the wildcard routes must come after / and /health
api_router = APIRouter()
api_router.include_router(root_router, tags=["echo"])
api_router.include_router(health_router, tags=["health"])
api_router.include_router(wildcard_router, tags=["echo"])
