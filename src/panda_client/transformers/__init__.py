"""JSON transformers for Panda resources."""

from panda_client.transformers.base import Transformer, WritableTransformer, decode_json
from panda_client.transformers.video import VideoTransformer
from panda_client.transformers.encoding import EncodingTransformer
from panda_client.transformers.profile import ProfileTransformer
from panda_client.transformers.cloud import CloudTransformer
from panda_client.transformers.notifications import NotificationsTransformer
from panda_client.transformers.registry import ResourceKind, TransformerRegistry

__all__ = [
    "Transformer",
    "WritableTransformer",
    "decode_json",
    "VideoTransformer",
    "EncodingTransformer",
    "ProfileTransformer",
    "CloudTransformer",
    "NotificationsTransformer",
    "ResourceKind",
    "TransformerRegistry",
]
