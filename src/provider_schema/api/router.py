"""API router factory aggregating all sub-routers."""

from fastapi import APIRouter

from provider_schema.api.schema.router import router as schema_router
from provider_schema.api.system.router import router as system_router


def build_router(schema_prefix: str) -> APIRouter:
    """Return the root router with the schema router mounted at ``schema_prefix``."""
    root_router = APIRouter()
    root_router.include_router(system_router, tags=["system"])
    root_router.include_router(schema_router, prefix=schema_prefix, tags=["schema"])
    return root_router
