"""Application layer package."""

from panda_client.application.cloud import Cloud
from panda_client.application.factories import CloudFactory

__all__ = ["Cloud", "CloudFactory"]
