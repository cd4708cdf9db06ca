"""Domain layer package."""

from .models import (
    Video,
    Encoding,
    EncodingStatus,
    Profile,
    CloudSettings,
    Notifications,
    NotificationEvents,
)
from .exceptions import (
    PandaClientError,
    PandaApiError,
    ResponseDecodeError,
    UploadFileError,
    ConfigurationError,
)
from .protocols import IRestClient, ITransformer

__all__ = [
    # Models
    "Video",
    "Encoding",
    "EncodingStatus",
    "Profile",
    "CloudSettings",
    "Notifications",
    "NotificationEvents",
    # Exceptions
    "PandaClientError",
    "PandaApiError",
    "ResponseDecodeError",
    "UploadFileError",
    "ConfigurationError",
    # Protocols
    "IRestClient",
    "ITransformer",
]
