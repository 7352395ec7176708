"""Schema router serving static JSON Schema documents."""

import logging

from fastapi import APIRouter
from fastapi.responses import Response

from provider_schema.schemas.providers import PROVIDERS_SCHEMA_ID, providers_schema_bytes

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/providers.json", response_class=Response)
async def providers_schema() -> Response:
    """Return the providers configuration schema.

    The body is the pre-encoded document, so repeated calls are
    byte-identical. The content type is set explicitly rather than left
    to the framework default.
    """
    logger.debug("Serving %s", PROVIDERS_SCHEMA_ID)
    return Response(content=providers_schema_bytes(), media_type="application/json")
