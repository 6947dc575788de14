"""Client utilities package: logging."""

from omdb_client.utils.logger import setup_logger

__all__ = ["setup_logger"]
