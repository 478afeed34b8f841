"""Configuration management."""

from .global_config import Config

__all__ = ["Config"]
