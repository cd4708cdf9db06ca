"""Lookup from resource kind to its transformer."""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

from panda_client.domain.protocols import ITransformer
from panda_client.transformers.cloud import CloudTransformer
from panda_client.transformers.encoding import EncodingTransformer
from panda_client.transformers.notifications import NotificationsTransformer
from panda_client.transformers.profile import ProfileTransformer
from panda_client.transformers.video import VideoTransformer


class ResourceKind(Enum):
    """Resource types exposed by the API."""

    VIDEO = 'video'
    ENCODING = 'encoding'
    PROFILE = 'profile'
    CLOUD = 'cloud'
    NOTIFICATIONS = 'notifications'


class TransformerRegistry:
    """
    Immutable mapping of every ResourceKind to one transformer instance.

    The registry must cover all kinds; asking for anything that is not a
    ResourceKind raises KeyError.
    """

    def __init__(self, transformers: Mapping[ResourceKind, ITransformer]):
        missing = [kind.name for kind in ResourceKind if kind not in transformers]
        if missing:
            raise ValueError(f"No transformer registered for: {', '.join(missing)}")
        self._transformers = MappingProxyType(dict(transformers))

    @classmethod
    def default(cls) -> 'TransformerRegistry':
        """Create the registry with the standard transformers."""
        return cls({
            ResourceKind.VIDEO: VideoTransformer(),
            ResourceKind.ENCODING: EncodingTransformer(),
            ResourceKind.PROFILE: ProfileTransformer(),
            ResourceKind.CLOUD: CloudTransformer(),
            ResourceKind.NOTIFICATIONS: NotificationsTransformer(),
        })

    def get(self, kind: ResourceKind) -> ITransformer:
        return self._transformers[kind]

    @property
    def video(self) -> VideoTransformer:
        return self._transformers[ResourceKind.VIDEO]

    @property
    def encoding(self) -> EncodingTransformer:
        return self._transformers[ResourceKind.ENCODING]

    @property
    def profile(self) -> ProfileTransformer:
        return self._transformers[ResourceKind.PROFILE]

    @property
    def cloud(self) -> CloudTransformer:
        return self._transformers[ResourceKind.CLOUD]

    @property
    def notifications(self) -> NotificationsTransformer:
        return self._transformers[ResourceKind.NOTIFICATIONS]
