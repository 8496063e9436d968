"""Global logging and error handling utilities"""
import logging
import sys
import traceback
from enum import Enum

from PyQt5.QtWidgets import QMessageBox

from mindflow.constants import DEFAULT_INVALID_INPUT_POLICY

# Detect debug mode - True if running from source, False if packaged
DEBUG_MODE = not getattr(sys, 'frozen', False)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

_main_window = None


def configure_logging(verbose: bool = False):
    """Configure root logging for the application (console only)."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def set_main_window(window):
    """Set the main window reference for showing popups"""
    global _main_window
    _main_window = window


def loggerRaise(e: Exception, user_message: str = None, title: str = "Error"):
    """Handle exceptions with optional popup in release mode

    Args:
        e: The exception to handle
        user_message: User-friendly message to show in popup (optional)
        title: Title for the popup dialog

    In DEBUG_MODE:
        - Just raises the exception (shows full traceback)

    In RELEASE_MODE:
        - Shows popup with user message or exception string
        - Logs the full traceback
        - Then raises the exception
    """
    if DEBUG_MODE:
        raise e

    logging.getLogger('MindFlow').error("%s\n%s", user_message or e, traceback.format_exc())

    message = user_message if user_message else str(e)
    if _main_window:
        QMessageBox.critical(_main_window, title, message)
    else:
        print(f"ERROR POPUP (no window): {title} - {message}", file=sys.stderr)

    raise e


class InvalidInputPolicy(Enum):
    """How a view model reports input it cannot use.

    IGNORE: drop the input silently, state unchanged
    WARN:   drop the input and log a warning
    RAISE:  raise the matching InvalidInputError
    """
    IGNORE = 'ignore'
    WARN = 'warn'
    RAISE = 'raise'

    @classmethod
    def coerce(cls, value):
        """Accept a policy, its string value, or None (project default)."""
        if value is None:
            return cls(DEFAULT_INVALID_INPUT_POLICY)
        return cls(value)


def report_invalid_input(policy: InvalidInputPolicy, logger: logging.Logger, error: Exception) -> None:
    """Apply an invalid-input policy to a rejected input.

    Returns normally for IGNORE and WARN; raises error for RAISE.
    """
    if policy is InvalidInputPolicy.RAISE:
        raise error
    if policy is InvalidInputPolicy.WARN:
        logger.warning("Ignoring invalid input: %s", error)
