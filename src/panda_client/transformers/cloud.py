"""Cloud settings transformer."""

from panda_client.domain.models import CloudSettings
from panda_client.transformers.base import Transformer


class CloudTransformer(Transformer[CloudSettings]):
    model = CloudSettings
    FIELDS = {
        'id': 'id',
        'name': 'name',
        's3_videos_bucket': 's3_bucket',
        's3_private_access': 's3_private_access',
        'url': 'url',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }
