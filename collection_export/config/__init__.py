"""Configuration package."""

from .settings import Config

__all__ = ["Config"]
