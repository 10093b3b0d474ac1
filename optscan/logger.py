# Optscan Option Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for optscan."""
import logging

logger: logging.Logger = logging.getLogger("optscan")
