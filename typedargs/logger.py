# typedargs — typed command-line argument engine — MIT Licensed
"""Global logger instance for typedargs."""
import logging

logger = logging.getLogger("typedargs")
