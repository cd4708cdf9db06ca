"""Configuration package."""

from panda_client.infrastructure.config.loader import ConfigLoader, PandaConfig

__all__ = ["ConfigLoader", "PandaConfig"]
