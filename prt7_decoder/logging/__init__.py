"""
Logging configuration and utilities for the PRT-7 decoder.
"""
from .config import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
