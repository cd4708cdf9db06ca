"""Video transformer."""

from panda_client.domain.models import Video
from panda_client.transformers.base import Transformer

MEDIA_FIELDS = {
    'extname': 'extname',
    'path': 'path',
    'mime_type': 'mime_type',
    'duration': 'duration',
    'width': 'width',
    'height': 'height',
    'file_size': 'file_size',
    'video_bitrate': 'video_bitrate',
    'audio_bitrate': 'audio_bitrate',
    'video_codec': 'video_codec',
    'audio_codec': 'audio_codec',
    'fps': 'fps',
    'audio_channels': 'audio_channels',
    'audio_sample_rate': 'audio_sample_rate',
}


class VideoTransformer(Transformer[Video]):
    model = Video
    FIELDS = {
        'id': 'id',
        'status': 'status',
        'original_filename': 'original_filename',
        'source_url': 'source_url',
        **MEDIA_FIELDS,
        'error_class': 'error_class',
        'error_message': 'error_message',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }
