"""
Base transformer.

A transformer maps between the JSON documents returned by the API and the
domain dataclasses. Subclasses declare the mapping in ``FIELDS`` (JSON key
to attribute name); unknown keys are ignored and missing keys leave the
dataclass default in place.
"""

import json
from typing import Any, Dict, Generic, List, Tuple, Type, TypeVar

from panda_client.domain.exceptions import ResponseDecodeError
from panda_client.shared.types import WireParams

T = TypeVar('T')

# Fields assigned by the service, never sent back
SERVER_ASSIGNED = ('id', 'created_at', 'updated_at')


def decode_json(raw: str) -> Any:
    """Decode a response body, raising ResponseDecodeError on bad input."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ResponseDecodeError(f"Malformed JSON response: {e}") from e


def to_param_value(value: Any) -> str:
    if isinstance(value, bool):
        return 'true' if value else 'false'
    return str(value)


class Transformer(Generic[T]):
    """Converts API JSON into instances of ``model``."""

    model: Type[T]
    FIELDS: Dict[str, str] = {}

    def from_json(self, raw: str) -> T:
        data = decode_json(raw)
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Expected a JSON object for {self.model.__name__}, got {type(data).__name__}"
            )
        return self.from_object(data)

    def from_json_collection(self, raw: str) -> List[T]:
        data = decode_json(raw)
        if not isinstance(data, list):
            raise ResponseDecodeError(
                f"Expected a JSON array of {self.model.__name__}, got {type(data).__name__}"
            )
        return [self.from_object(item) for item in data]

    def from_object(self, data: Dict[str, Any]) -> T:
        if not isinstance(data, dict):
            raise ResponseDecodeError(
                f"Expected a JSON object for {self.model.__name__}, got {type(data).__name__}"
            )
        kwargs = {
            attribute: self.convert(attribute, data[key])
            for key, attribute in self.FIELDS.items()
            if key in data
        }
        return self.model(**kwargs)

    def convert(self, attribute: str, value: Any) -> Any:
        """Hook for per-attribute conversion of decoded values."""
        return value


class WritableTransformer(Transformer[T]):
    """Transformer for resources that can be created or updated.

    ``to_request_params`` emits every mapped field except the
    server-assigned ones, skipping unset values.
    """

    def writable_fields(self) -> List[Tuple[str, str]]:
        return [
            (key, attribute)
            for key, attribute in self.FIELDS.items()
            if key not in SERVER_ASSIGNED
        ]

    def to_request_params(self, obj: T) -> WireParams:
        params: WireParams = {}
        for key, attribute in self.writable_fields():
            value = getattr(obj, attribute)
            if value is None:
                continue
            params[key] = to_param_value(value)
        return params
