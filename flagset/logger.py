# Flagset — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagset."""
import logging

logger: logging.Logger = logging.getLogger("flagset")
