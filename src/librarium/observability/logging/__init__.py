"""Observability – structured logging helpers."""
from librarium.observability.logging.protocol import Logger
from librarium.observability.logging.factory import JsonLoggerFactory
from librarium.observability.logging.processors import drop_empty_values, get_logger

__all__ = ["JsonLoggerFactory", "Logger", "drop_empty_values", "get_logger"]
