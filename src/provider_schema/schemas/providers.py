"""JSON Schema (draft 2020-12) for the ``providers`` configuration block.

The document describes which provider instances the UI enables and how
provider-aware views group their sections. It is a constant: built once at
import time, never mutated, and served byte-for-byte identical on every
request.

Patterns accepted by ``include`` / ``exclude``:

- exact instance IDs, e.g. ``gitlab:gitlab.com``
- provider wildcards, e.g. ``gitlab:*``
- provider aliases, e.g. ``gitlab`` or ``github``
"""

from __future__ import annotations

import copy
import json
from functools import lru_cache
from typing import Any

JSON_SCHEMA_DIALECT = "https://json-schema.org/draft/2020-12/schema"
PROVIDERS_SCHEMA_ID = "providers.schema.json"

_PATTERN_HELP = (
    "Supports exact instance IDs (gitlab:gitlab.com), provider wildcards "
    "(gitlab:*), or provider aliases (gitlab/github)."
)


def _pattern_list(title: str, verb: str) -> dict[str, Any]:
    """Schema for an ordered list of provider patterns."""
    return {
        "title": title,
        "description": f"List of provider patterns to {verb}. {_PATTERN_HELP}",
        "type": "array",
        "items": {
            "type": "string",
        },
    }


_PROVIDERS_SCHEMA: dict[str, Any] = {
    "$schema": JSON_SCHEMA_DIALECT,
    "$id": PROVIDERS_SCHEMA_ID,
    "title": "Providers",
    "description": "Configure which provider instances are enabled in the UI.",
    "type": "object",
    "properties": {
        "include": _pattern_list("Include Providers", "include"),
        "exclude": _pattern_list("Exclude Providers", "exclude"),
        "defaults": {
            "title": "Provider Defaults",
            "description": "Default UI behavior for provider-aware views.",
            "type": "object",
            "properties": {
                "groupByProvider": {
                    "title": "Group By Provider",
                    "description": (
                        "When true, sections are grouped by provider instance by default."
                    ),
                    "type": "boolean",
                },
            },
        },
    },
}


def get_providers_schema() -> dict[str, Any]:
    """Return a private copy of the providers schema document."""
    return copy.deepcopy(_PROVIDERS_SCHEMA)


@lru_cache(maxsize=1)
def providers_schema_bytes() -> bytes:
    """Return the canonical UTF-8 JSON encoding of the providers schema.

    Key order follows the document definition, so every response body is
    byte-identical.
    """
    return json.dumps(_PROVIDERS_SCHEMA, ensure_ascii=False).encode("utf-8")
