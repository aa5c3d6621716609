"""ETL utilities package: logging setup."""

from src.etl.utils.logger import setup_logger

__all__ = ["setup_logger"]
