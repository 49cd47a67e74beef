"""Logging configuration for fallible."""

from .logger import ROOT_LOGGER, configure_logging, get_logger

__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
