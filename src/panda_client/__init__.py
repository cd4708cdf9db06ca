"""Python client for the Panda video encoding REST API."""

from panda_client.application import Cloud, CloudFactory
from panda_client.domain import (
    Video,
    Encoding,
    EncodingStatus,
    Profile,
    CloudSettings,
    Notifications,
    NotificationEvents,
    PandaClientError,
    PandaApiError,
    ResponseDecodeError,
    UploadFileError,
    ConfigurationError,
)
from panda_client.infrastructure.config import ConfigLoader, PandaConfig
from panda_client.infrastructure.http import RestClient
from panda_client.shared.logging import get_logger
from panda_client.transformers import ResourceKind, TransformerRegistry

__version__ = "1.0.0"

get_logger(__name__)

__all__ = [
    "Cloud",
    "CloudFactory",
    "ConfigLoader",
    "PandaConfig",
    "RestClient",
    "ResourceKind",
    "TransformerRegistry",
    "Video",
    "Encoding",
    "EncodingStatus",
    "Profile",
    "CloudSettings",
    "Notifications",
    "NotificationEvents",
    "PandaClientError",
    "PandaApiError",
    "ResponseDecodeError",
    "UploadFileError",
    "ConfigurationError",
]
