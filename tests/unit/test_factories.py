"""
Unit tests for the cloud factory.
"""

import pytest

from panda_client.application.cloud import Cloud
from panda_client.application.factories import CloudFactory
from panda_client.infrastructure.config.loader import PandaConfig
from panda_client.infrastructure.http.rest_client import RestClient
from panda_client.transformers import TransformerRegistry


@pytest.fixture
def config():
    return PandaConfig(cloud_id="cloud-123", access_key="k", secret_key="s")


class TestCloudFactory:
    """Test CloudFactory wiring."""

    def test_create_cloud(self, config):
        """Test the facade is bound to the configured cloud."""
        cloud = CloudFactory(config).create_cloud()

        assert isinstance(cloud, Cloud)
        assert isinstance(cloud.rest_client, RestClient)
        assert cloud.rest_client.get_cloud_id() == "cloud-123"

    def test_create_cloud_other_id(self, config):
        """Test another cloud id does not change the shared config."""
        cloud = CloudFactory(config).create_cloud(cloud_id="other")

        assert cloud.rest_client.get_cloud_id() == "other"
        assert config.cloud_id == "cloud-123"

    def test_shared_registry(self, config):
        """Test clouds of one factory share its registry."""
        registry = TransformerRegistry.default()
        factory = CloudFactory(config, transformers=registry)

        assert factory.transformers is registry
        assert factory.create_cloud() is not factory.create_cloud()

    def test_from_file(self, tmp_path, monkeypatch):
        """Test building a factory from a YAML file."""
        for name in ('PANDA_CLOUD_ID', 'PANDA_ACCESS_KEY', 'PANDA_SECRET_KEY'):
            monkeypatch.delenv(name, raising=False)
        path = tmp_path / "panda.yaml"
        path.write_text("cloud_id: from-file\naccess_key: k\nsecret_key: s\n")

        factory = CloudFactory.from_file(path)

        assert factory.config.cloud_id == "from-file"
