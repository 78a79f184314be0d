"""Shared utilities and configuration."""

from src.shared.config import Config
from src.shared.exceptions import DataSourceError
from src.shared.utils import setup_logger

__all__ = ["Config", "DataSourceError", "setup_logger"]
