"""HTTP transport package."""

from panda_client.infrastructure.http.rest_client import (
    RestClient,
    normalize_params,
    canonical_querystring,
    generate_signature,
)

__all__ = [
    "RestClient",
    "normalize_params",
    "canonical_querystring",
    "generate_signature",
]
