"""
Logger
Structured logging for the OpenClaw MCP Server.

Everything goes to stderr: stdout carries the MCP protocol stream.
"""

import logging
import sys
from typing import Optional


def resolve_level(level: str) -> int:
    """Map a level name such as "debug" to its logging constant; INFO if unknown."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


class Logger:
    """Thin wrapper over a stderr ``logging.Logger``."""

    def __init__(self, name: str = "openclaw", level: str = "INFO"):
        self.logger = logging.getLogger(name)
        self.logger.setLevel(resolve_level(level))

        # Handlers are shared per name; attach ours once
        if not self.logger.handlers:
            handler = logging.StreamHandler(sys.stderr)
            handler.setFormatter(logging.Formatter(
                '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ))
            self.logger.addHandler(handler)

    def debug(self, message: str, extra: Optional[dict] = None):
        self.logger.debug(message, extra=extra)

    def info(self, message: str, extra: Optional[dict] = None):
        self.logger.info(message, extra=extra)

    def warning(self, message: str, extra: Optional[dict] = None):
        self.logger.warning(message, extra=extra)

    def error(self, message: str, extra: Optional[dict] = None, exc_info: bool = False):
        self.logger.error(message, extra=extra, exc_info=exc_info)

    def isEnabledFor(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)
