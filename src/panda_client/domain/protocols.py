"""Protocol definitions for dependency inversion."""

from typing import Protocol, List, Optional, Dict, Any, TypeVar

T_co = TypeVar('T_co', covariant=True)


class IRestClient(Protocol):
    """Interface for the HTTP transport used by the cloud facade.

    Every method returns the raw response body. Failures are raised as
    ``PandaApiError``.
    """

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Perform a GET request."""
        ...

    def post(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Perform a POST request."""
        ...

    def put(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Perform a PUT request."""
        ...

    def delete(self, path: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Perform a DELETE request."""
        ...

    def get_cloud_id(self) -> str:
        """Get the default cloud id of this client."""
        ...


class ITransformer(Protocol[T_co]):
    """Interface for converting between JSON and domain objects."""

    def from_json(self, raw: str) -> T_co:
        """Build an object from a JSON document."""
        ...

    def from_json_collection(self, raw: str) -> List[T_co]:
        """Build a list of objects from a JSON array."""
        ...

    def from_object(self, data: Dict[str, Any]) -> T_co:
        """Build an object from an already decoded JSON object."""
        ...

