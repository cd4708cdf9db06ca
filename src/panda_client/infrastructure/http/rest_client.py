"""
Panda REST client implementation.

Infrastructure layer for the HTTP transport: request signing, parameter
encoding and error reporting.
"""

import base64
import hashlib
import hmac
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, BinaryIO, Dict, Optional, Tuple
from urllib.parse import quote

import requests
from requests.exceptions import RequestException

from panda_client.domain.exceptions import PandaApiError, UploadFileError
from panda_client.infrastructure.config.loader import PandaConfig
from panda_client.shared.retry import RetryStrategy
from panda_client.shared.types import Params, WireParams

# Prefix marking a parameter value as a local file to upload
FILE_MARKER = '@'

# Parameters never included in the signature
UNSIGNED_PARAMS = ('file',)


def normalize_params(params: Optional[Params]) -> WireParams:
    """Convert parameter values to the strings sent on the wire.

    Booleans become ``true``/``false`` and ``None`` values are dropped.
    """
    result: WireParams = {}
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, bool):
            result[key] = 'true' if value else 'false'
        else:
            result[key] = str(value)
    return result


def canonical_querystring(params: WireParams) -> str:
    """Build the sorted, RFC 3986 encoded query string used for signing."""
    return '&'.join(
        f"{quote(key, safe='-_.~')}={quote(value, safe='-_.~')}"
        for key, value in sorted(params.items())
        if key not in UNSIGNED_PARAMS
    )


def generate_signature(
    method: str,
    host: str,
    path: str,
    params: WireParams,
    secret_key: str
) -> str:
    """Compute the base64 HMAC-SHA256 signature of a request."""
    string_to_sign = '\n'.join([
        method.upper(),
        host.lower(),
        path,
        canonical_querystring(params),
    ])
    digest = hmac.new(
        secret_key.encode('utf-8'),
        string_to_sign.encode('utf-8'),
        hashlib.sha256
    ).digest()
    return base64.b64encode(digest).decode('ascii')


class RestClient:
    """
    Panda REST client implementation.

    Uses a requests session to talk to the versioned API. Every request is
    signed with the configured credentials; responses are returned as raw
    text and failures are raised as PandaApiError.
    """

    def __init__(
        self,
        config: PandaConfig,
        session: Optional[requests.Session] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize REST client.

        Args:
            config: Connection settings and credentials
            session: Session to send requests with (a new one if None)
            logger: Logger instance
        """
        self.config = config
        self.logger = logger or logging.getLogger(__name__)

        self.session = session or requests.Session()
        self.session.headers.update({
            'Accept': 'application/json',
        })

        self._retry = RetryStrategy(
            max_attempts=config.max_retries + 1,
            exceptions=(requests.ConnectionError, requests.Timeout),
            logger=self.logger
        )
        # POST is retried only when the connection was never established
        self._post_retry = RetryStrategy(
            max_attempts=config.max_retries + 1,
            exceptions=(requests.ConnectTimeout,),
            logger=self.logger
        )

    def get_cloud_id(self) -> str:
        """Get the default cloud id of this client."""
        return self.config.cloud_id

    def get(self, path: str, params: Optional[Params] = None) -> str:
        return self._request('GET', path, params)

    def post(self, path: str, params: Optional[Params] = None) -> str:
        return self._request('POST', path, params)

    def put(self, path: str, params: Optional[Params] = None) -> str:
        return self._request('PUT', path, params)

    def delete(self, path: str, params: Optional[Params] = None) -> str:
        return self._request('DELETE', path, params)

    def signed_params(
        self,
        method: str,
        path: str,
        params: WireParams,
        timestamp: Optional[str] = None
    ) -> WireParams:
        """
        Add authentication parameters and the signature.

        Args:
            method: HTTP method
            path: Request path without the version prefix
            params: Normalized request parameters
            timestamp: ISO-8601 timestamp (current time if None)

        Returns:
            New parameter dict including access_key, cloud_id, timestamp
            and signature
        """
        signed = dict(params)
        signed['access_key'] = self.config.access_key
        signed['cloud_id'] = self.config.cloud_id
        signed['timestamp'] = timestamp or self._timestamp()
        signed['signature'] = generate_signature(
            method,
            self.config.api_host,
            path,
            signed,
            self.config.secret_key
        )
        return signed

    def _request(
        self,
        method: str,
        path: str,
        params: Optional[Params] = None
    ) -> str:
        """
        Make API request.

        Args:
            method: HTTP method
            path: Resource path, e.g. '/videos.json'
            params: Request parameters

        Returns:
            Raw response body

        Raises:
            PandaApiError: On HTTP or connection error
            UploadFileError: If a file to upload cannot be opened
        """
        wire_params = normalize_params(params)
        upload = self._extract_upload(method, wire_params)
        signed = self.signed_params(method, path, wire_params)

        url = f"{self.config.base_url}{path}"
        kwargs: Dict[str, Any] = {'timeout': self.config.timeout}
        if method in ('GET', 'DELETE'):
            kwargs['params'] = signed
        else:
            kwargs['data'] = signed

        self.logger.debug(f"{method} {path}")

        retry = self._post_retry if method == 'POST' else self._retry

        try:
            if upload is None:
                response = retry.execute(self._send, method, url, **kwargs)
            else:
                with self._open_upload(upload) as fh:
                    kwargs['files'] = {'file': (upload.name, fh)}
                    response = self._send(method, url, **kwargs)
        except requests.HTTPError as e:
            raise self._api_error(method, path, e) from e
        except RequestException as e:
            error_msg = f"Panda API request failed: {method} {path}: {e}"
            self.logger.error(error_msg)
            raise PandaApiError(error_msg) from e

        return response.text

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        response = self.session.request(method, url, **kwargs)
        response.raise_for_status()
        return response

    def _extract_upload(self, method: str, params: WireParams) -> Optional[Path]:
        """Pop a '@/local/path' file parameter and return the path."""
        value = params.get('file')
        if method != 'POST' or value is None or not value.startswith(FILE_MARKER):
            return None

        del params['file']
        return Path(value[len(FILE_MARKER):])

    def _open_upload(self, local_path: Path) -> BinaryIO:
        try:
            return open(local_path, 'rb')
        except OSError as e:
            error_msg = f"Cannot open file to upload: {local_path}: {e}"
            self.logger.error(error_msg)
            raise UploadFileError(error_msg) from e

    def _api_error(self, method: str, path: str, exc: requests.HTTPError) -> PandaApiError:
        response = exc.response
        status_code = response.status_code if response is not None else None
        body = response.text if response is not None else None
        error, message = self._parse_error_body(body)

        error_msg = f"Panda API request failed: {method} {path} -> {status_code}"
        if error or message:
            error_msg += f" ({error}: {message})"
        self.logger.error(error_msg)

        return PandaApiError(
            error_msg,
            status_code=status_code,
            body=body,
            error=error,
            api_message=message
        )

    @staticmethod
    def _parse_error_body(body: Optional[str]) -> Tuple[Optional[str], Optional[str]]:
        """Extract 'error' and 'message' from a Panda error payload."""
        if not body:
            return None, None
        try:
            payload = json.loads(body)
        except ValueError:
            return None, None
        if not isinstance(payload, dict):
            return None, None
        return payload.get('error'), payload.get('message')

    @staticmethod
    def _timestamp() -> str:
        return datetime.now(timezone.utc).isoformat(timespec='microseconds')
