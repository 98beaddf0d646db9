"""
Logging configuration and utilities for the simulator.
"""
from .config import LOG_LEVELS, configure_logging, get_logger

__all__ = ["LOG_LEVELS", "configure_logging", "get_logger"]
