"""Factory for creating cloud facades."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from panda_client.application.cloud import Cloud
from panda_client.infrastructure.config.loader import ConfigLoader, PandaConfig
from panda_client.infrastructure.http.rest_client import RestClient
from panda_client.shared.logging import get_logger
from panda_client.transformers.registry import TransformerRegistry


class CloudFactory:
    """
    Factory wiring configuration, transport and transformers into a Cloud.

    Usage:
        factory = CloudFactory.from_file(Path('panda.yaml'))
        cloud = factory.create_cloud()
        # or, for another cloud with the same credentials
        other = factory.create_cloud(cloud_id='abc123')
    """

    def __init__(
        self,
        config: PandaConfig,
        transformers: Optional[TransformerRegistry] = None,
        logger: Optional[logging.Logger] = None
    ):
        self.config = config
        self.transformers = transformers or TransformerRegistry.default()
        self._logger = logger or get_logger(__name__)

    @classmethod
    def from_file(cls, config_path: Optional[Path] = None) -> 'CloudFactory':
        """Create a factory from a YAML file and the environment."""
        return cls(ConfigLoader(config_path).load())

    def create_rest_client(self, cloud_id: Optional[str] = None) -> RestClient:
        config = self.config
        if cloud_id is not None and cloud_id != config.cloud_id:
            config = replace(config, cloud_id=cloud_id)
        return RestClient(config, logger=self._logger)

    def create_cloud(self, cloud_id: Optional[str] = None) -> Cloud:
        """
        Create a Cloud facade.

        Args:
            cloud_id: Cloud to bind the transport to; the configured cloud
                if None
        """
        rest_client = self.create_rest_client(cloud_id)
        self._logger.debug(f"Created cloud facade for {rest_client.get_cloud_id()}")
        return Cloud(rest_client, self.transformers)
