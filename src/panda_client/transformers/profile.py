"""Profile transformer."""

from panda_client.domain.models import Profile
from panda_client.transformers.base import WritableTransformer


class ProfileTransformer(WritableTransformer[Profile]):
    model = Profile
    FIELDS = {
        'id': 'id',
        'name': 'name',
        'title': 'title',
        'preset_name': 'preset_name',
        'extname': 'extname',
        'width': 'width',
        'height': 'height',
        'upscale': 'upscale',
        'aspect_mode': 'aspect_mode',
        'two_pass': 'two_pass',
        'video_bitrate': 'video_bitrate',
        'audio_bitrate': 'audio_bitrate',
        'audio_sample_rate': 'audio_sample_rate',
        'audio_channels': 'audio_channels',
        'fps': 'fps',
        'keyframe_interval': 'keyframe_interval',
        'keyframe_rate': 'keyframe_rate',
        'clip_length': 'clip_length',
        'clip_offset': 'clip_offset',
        'command': 'command',
        'watermark_url': 'watermark_url',
        'watermark_top': 'watermark_top',
        'watermark_bottom': 'watermark_bottom',
        'watermark_left': 'watermark_left',
        'watermark_right': 'watermark_right',
        'watermark_width': 'watermark_width',
        'watermark_height': 'watermark_height',
        'created_at': 'created_at',
        'updated_at': 'updated_at',
    }
