"""Domain models for Panda resources."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Union


class EncodingStatus(str, Enum):
    """Server-side states of an encoding job."""

    QUEUED = 'queued'
    PROCESSING = 'processing'
    SUCCESS = 'success'
    ERROR = 'error'
    CANCELLED = 'cancelled'

    @classmethod
    def parse(cls, value: Optional[str]) -> Union['EncodingStatus', str, None]:
        """Map a status string to the enum, keeping unknown values as-is."""
        if value is None:
            return None
        try:
            return cls(value)
        except ValueError:
            return value


@dataclass(frozen=True)
class Video:
    """A video uploaded to a cloud."""

    id: Optional[str] = None
    status: Optional[str] = None
    original_filename: Optional[str] = None
    extname: Optional[str] = None
    source_url: Optional[str] = None
    path: Optional[str] = None
    mime_type: Optional[str] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    fps: Optional[float] = None
    audio_channels: Optional[int] = None
    audio_sample_rate: Optional[int] = None
    error_class: Optional[str] = None
    error_message: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_success(self) -> bool:
        return self.status == 'success'

    @property
    def is_failed(self) -> bool:
        return self.status == 'fail'

    def __str__(self) -> str:
        return f"Video #{self.id} ({self.status})"


@dataclass(frozen=True)
class Encoding:
    """An encoding job converting a video under a profile."""

    id: Optional[str] = None
    video_id: Optional[str] = None
    profile_id: Optional[str] = None
    profile_name: Optional[str] = None
    status: Union[EncodingStatus, str, None] = None
    progress: Optional[int] = None
    encoding_time: Optional[int] = None
    started_encoding_at: Optional[str] = None
    extname: Optional[str] = None
    path: Optional[str] = None
    mime_type: Optional[str] = None
    duration: Optional[int] = None
    width: Optional[int] = None
    height: Optional[int] = None
    file_size: Optional[int] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    video_codec: Optional[str] = None
    audio_codec: Optional[str] = None
    fps: Optional[float] = None
    audio_channels: Optional[int] = None
    audio_sample_rate: Optional[int] = None
    files: List[str] = field(default_factory=list)
    error_class: Optional[str] = None
    error_message: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @property
    def is_finished(self) -> bool:
        """Check if the job reached a terminal state."""
        return self.status in (
            EncodingStatus.SUCCESS,
            EncodingStatus.ERROR,
            EncodingStatus.CANCELLED,
        )

    def __str__(self) -> str:
        status = self.status.value if isinstance(self.status, EncodingStatus) else self.status
        return f"Encoding #{self.id} ({status})"


@dataclass
class Profile:
    """An encoding preset.

    Profiles are mutable so they can be edited locally and sent back with
    ``Cloud.set_profile``. The ``id`` is assigned by the service.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    title: Optional[str] = None
    preset_name: Optional[str] = None
    extname: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
    upscale: Optional[bool] = None
    aspect_mode: Optional[str] = None
    two_pass: Optional[bool] = None
    video_bitrate: Optional[int] = None
    audio_bitrate: Optional[int] = None
    audio_sample_rate: Optional[int] = None
    audio_channels: Optional[int] = None
    fps: Optional[float] = None
    keyframe_interval: Optional[int] = None
    keyframe_rate: Optional[float] = None
    clip_length: Optional[str] = None
    clip_offset: Optional[str] = None
    command: Optional[str] = None
    watermark_url: Optional[str] = None
    watermark_top: Optional[str] = None
    watermark_bottom: Optional[str] = None
    watermark_left: Optional[str] = None
    watermark_right: Optional[str] = None
    watermark_width: Optional[str] = None
    watermark_height: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def __str__(self) -> str:
        return f"Profile #{self.id} ({self.name})"


@dataclass(frozen=True)
class CloudSettings:
    """Settings of a cloud (tenant)."""

    id: Optional[str] = None
    name: Optional[str] = None
    s3_bucket: Optional[str] = None
    s3_private_access: Optional[bool] = None
    url: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None


@dataclass(frozen=True)
class NotificationEvents:
    """Events that trigger a notification request."""

    video_created: bool = False
    video_encoded: bool = False
    encoding_progress: bool = False
    encoding_completed: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return {
            'video_created': self.video_created,
            'video_encoded': self.video_encoded,
            'encoding_progress': self.encoding_progress,
            'encoding_completed': self.encoding_completed,
        }


@dataclass(frozen=True)
class Notifications:
    """Webhook configuration of a cloud."""

    url: Optional[str] = None
    delay: Optional[int] = None
    events: NotificationEvents = field(default_factory=NotificationEvents)
