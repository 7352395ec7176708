"""Static JSON Schema documents served by the API."""

from provider_schema.schemas.providers import (
    PROVIDERS_SCHEMA_ID,
    get_providers_schema,
    providers_schema_bytes,
)

__all__ = [
    "PROVIDERS_SCHEMA_ID",
    "get_providers_schema",
    "providers_schema_bytes",
]
