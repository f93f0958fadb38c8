"""Configuration models."""

from .config import CatalogConfig, load_config, save_config, create_default_config

__all__ = ["CatalogConfig", "load_config", "save_config", "create_default_config"]
