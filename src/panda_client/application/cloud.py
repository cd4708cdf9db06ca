"""
Object-oriented interface to a Panda cloud.

Every method maps to one endpoint of the Panda encoding REST API: it builds
the path and parameters, performs exactly one request through the REST
client and converts the response with the matching transformer. Errors
raised by the REST client propagate unchanged.
"""

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from panda_client.domain.models import (
    CloudSettings,
    Encoding,
    Notifications,
    Profile,
    Video,
)
from panda_client.domain.exceptions import ResponseDecodeError
from panda_client.domain.protocols import IRestClient
from panda_client.shared.types import Params, PathLike
from panda_client.transformers.base import decode_json
from panda_client.transformers.registry import TransformerRegistry


class Cloud:
    """Facade over all endpoints of one Panda cloud."""

    def __init__(
        self,
        rest_client: IRestClient,
        transformers: Optional[TransformerRegistry] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize the facade.

        Args:
            rest_client: Transport used for all requests
            transformers: Transformer lookup (default registry if None)
            logger: Logger instance
        """
        self._rest_client = rest_client
        self._transformers = transformers or TransformerRegistry.default()
        self.logger = logger or logging.getLogger(__name__)

    @property
    def rest_client(self) -> IRestClient:
        return self._rest_client

    # Videos

    def get_videos(self) -> List[Video]:
        """Retrieve all videos of the cloud."""
        response = self._rest_client.get('/videos.json')
        return self._transformers.video.from_json_collection(response)

    def get_videos_for_pagination(self, page: int = 1, per_page: int = 100) -> Dict[str, Any]:
        """
        Retrieve one page of videos.

        Args:
            page: Page number, starting at 1
            per_page: Number of videos per page

        Returns:
            The decoded response envelope, with every entry of 'videos'
            converted to a Video; the other keys (total count, page info)
            are left as returned
        """
        self.logger.debug(f"Fetching videos page={page} per_page={per_page}")
        response = self._rest_client.get(
            '/videos.json',
            {
                'include_root': True,
                'page': page,
                'per_page': per_page,
            }
        )
        transformer = self._transformers.video
        result = decode_json(response)
        if not isinstance(result, dict) or not isinstance(result.get('videos'), list):
            raise ResponseDecodeError("Expected a paginated envelope with a 'videos' array")
        result['videos'] = [transformer.from_object(video) for video in result['videos']]
        return result

    def get_video(self, video_id: str) -> Video:
        response = self._rest_client.get(f'/videos/{video_id}.json')
        return self._transformers.video.from_json(response)

    def get_video_metadata(self, video_id: str) -> Dict[str, Any]:
        """Retrieve the raw metadata extracted from a video's source file."""
        response = self._rest_client.get(f'/videos/{video_id}/metadata.json')
        return decode_json(response)

    def delete_video(self, video_id: str) -> str:
        self.logger.debug(f"Deleting video {video_id}")
        return self._rest_client.delete(f'/videos/{video_id}.json')

    def encode_video_by_url(self, url: str) -> Video:
        """Create a video from a remote source URL."""
        response = self._rest_client.post('/videos.json', {'source_url': url})
        return self._transformers.video.from_json(response)

    def encode_video_file(self, local_path: PathLike) -> Video:
        """Upload a local file and create a video from it."""
        self.logger.debug(f"Uploading video file {local_path}")
        response = self._rest_client.post('/videos.json', {'file': f'@{local_path}'})
        return self._transformers.video.from_json(response)

    def register_upload(
        self,
        filename: str,
        file_size: int,
        profiles: Optional[Sequence[str]] = None,
        use_all_profiles: bool = False
    ) -> Dict[str, Any]:
        """
        Register a resumable upload session.

        Args:
            filename: Name of the file to upload
            file_size: Size of the file in bytes
            profiles: Names of the profiles to encode with; when given,
                use_all_profiles is not sent
            use_all_profiles: Encode with all profiles of the cloud; only
                used when profiles is None

        Returns:
            The decoded response (contains the upload location)
        """
        options: Params = {
            'file_name': filename,
            'file_size': file_size,
        }
        if profiles is not None:
            options['profiles'] = ','.join(profiles)
        else:
            options['use_all_profiles'] = use_all_profiles

        return decode_json(self._rest_client.post('/videos/upload.json', options))

    # Encodings

    def get_encodings(self, filter: Optional[Params] = None) -> List[Encoding]:
        """Retrieve encodings, optionally filtered by the given parameters."""
        response = self._rest_client.get('/encodings.json', dict(filter or {}))
        return self._transformers.encoding.from_json_collection(response)

    def get_encodings_with_status(self, status: str, filter: Optional[Params] = None) -> List[Encoding]:
        return self.get_encodings(self._with_filter(filter, 'status', status))

    def get_encodings_for_profile(self, profile_id: str, filter: Optional[Params] = None) -> List[Encoding]:
        return self.get_encodings(self._with_filter(filter, 'profile_id', profile_id))

    def get_encodings_for_profile_by_name(
        self,
        profile_name: str,
        filter: Optional[Params] = None
    ) -> List[Encoding]:
        return self.get_encodings(self._with_filter(filter, 'profile_name', profile_name))

    def get_encodings_for_video(self, video_id: str, filter: Optional[Params] = None) -> List[Encoding]:
        return self.get_encodings(self._with_filter(filter, 'video_id', video_id))

    def get_encoding(self, encoding_id: str) -> Encoding:
        response = self._rest_client.get(f'/encodings/{encoding_id}.json')
        return self._transformers.encoding.from_json(response)

    def create_encoding(self, video_id: str, profile_id: str) -> Encoding:
        """Encode a video with the profile identified by its id."""
        response = self._rest_client.post(
            '/encodings.json',
            {'video_id': video_id, 'profile_id': profile_id}
        )
        return self._transformers.encoding.from_json(response)

    def create_encoding_with_profile_name(self, video_id: str, profile_name: str) -> Encoding:
        """Encode a video with the profile identified by its name."""
        response = self._rest_client.post(
            '/encodings.json',
            {'video_id': video_id, 'profile_name': profile_name}
        )
        return self._transformers.encoding.from_json(response)

    def cancel_encoding(self, encoding_id: str) -> str:
        self.logger.debug(f"Cancelling encoding {encoding_id}")
        return self._rest_client.post(f'/encodings/{encoding_id}/cancel.json')

    def retry_encoding(self, encoding_id: str) -> str:
        self.logger.debug(f"Retrying encoding {encoding_id}")
        return self._rest_client.post(f'/encodings/{encoding_id}/retry.json')

    def delete_encoding(self, encoding_id: str) -> str:
        self.logger.debug(f"Deleting encoding {encoding_id}")
        return self._rest_client.delete(f'/encodings/{encoding_id}.json')

    # Profiles

    def get_profiles(self) -> List[Profile]:
        response = self._rest_client.get('/profiles.json')
        return self._transformers.profile.from_json_collection(response)

    def get_profile(self, profile_id: str) -> Profile:
        response = self._rest_client.get(f'/profiles/{profile_id}.json')
        return self._transformers.profile.from_json(response)

    def add_profile(self, data: Params) -> Profile:
        response = self._rest_client.post('/profiles.json', data)
        return self._transformers.profile.from_json(response)

    def add_profile_from_preset(self, preset_name: str) -> Profile:
        response = self._rest_client.post('/profiles.json', {'preset_name': preset_name})
        return self._transformers.profile.from_json(response)

    def set_profile(self, profile: Profile) -> Profile:
        """Send the writable fields of a profile and return the updated profile."""
        transformer = self._transformers.profile
        response = self._rest_client.put(
            f'/profiles/{profile.id}.json',
            transformer.to_request_params(profile)
        )
        return transformer.from_json(response)

    def delete_profile(self, profile: Profile) -> str:
        self.logger.debug(f"Deleting profile {profile.id}")
        return self._rest_client.delete(f'/profiles/{profile.id}.json')

    # Cloud settings

    def get_cloud(self, cloud_id: Optional[str] = None) -> CloudSettings:
        """
        Retrieve the settings of a cloud.

        Args:
            cloud_id: Cloud to read; the REST client's default cloud if None
        """
        if cloud_id is None:
            cloud_id = self._rest_client.get_cloud_id()

        response = self._rest_client.get(f'/clouds/{cloud_id}.json')
        return self._transformers.cloud.from_json(response)

    def set_cloud(self, data: Params, cloud_id: Optional[str] = None) -> CloudSettings:
        """
        Change the settings of a cloud.

        Args:
            data: Settings to change
            cloud_id: Cloud to update; the REST client's default cloud if None
        """
        if cloud_id is None:
            cloud_id = self._rest_client.get_cloud_id()

        response = self._rest_client.put(f'/clouds/{cloud_id}.json', data)
        return self._transformers.cloud.from_json(response)

    # Notifications

    def get_notifications(self) -> Notifications:
        response = self._rest_client.get('/notifications.json')
        return self._transformers.notifications.from_json(response)

    def set_notifications(self, data: Union[Params, Notifications]) -> Notifications:
        """Change the notification settings, given as raw params or a Notifications object."""
        transformer = self._transformers.notifications
        if isinstance(data, Notifications):
            data = transformer.to_request_params(data)

        response = self._rest_client.put('/notifications.json', data)
        return transformer.from_json(response)

    @staticmethod
    def _with_filter(filter: Optional[Params], key: str, value: Any) -> Params:
        result = dict(filter or {})
        result[key] = value
        return result
