"""Encoding transformer."""

from typing import Any

from panda_client.domain.models import Encoding, EncodingStatus
from panda_client.transformers.base import Transformer
from panda_client.transformers.video import MEDIA_FIELDS


class EncodingTransformer(Transformer[Encoding]):
    model = Encoding
    FIELDS = {
        'id': 'id',
        'video_id': 'video_id',
        'profile_id': 'profile_id',
        'profile_name': 'profile_name',
        'status': 'status',
        'encoding_progress': 'progress',
        'encoding_time': 'encoding_time',
        'started_encoding_at': 'started_encoding_at',
        **MEDIA_FIELDS,
        'files': 'files',
        'error_class': 'error_class',
        'error_message': 'error_message',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }

    def convert(self, attribute: str, value: Any) -> Any:
        if attribute == 'status':
            return EncodingStatus.parse(value)
        if attribute == 'files':
            return list(value or [])
        return value
