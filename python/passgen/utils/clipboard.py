"""
Clipboard hand-off for generated passwords.
"""

import logging
import time

import pyperclip

logger = logging.getLogger(__name__)

CLIPBOARD_CLEAR_SECONDS = 60


def copy_to_clipboard(value: str) -> bool:
    """
    Copy a value to the clipboard.

    Args:
        value: Text to copy

    Returns:
        True if the value was copied, False otherwise
    """
    try:
        pyperclip.copy(value)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Could not copy to clipboard: {e}")
        return False

    return True


def clear_clipboard(value: str) -> bool:
    """
    Clear the clipboard if it still holds the given value.

    Args:
        value: Text that was copied earlier

    Returns:
        True if the clipboard no longer holds the value, False on failure
    """
    try:
        # Leave the clipboard alone if the user copied something else meanwhile
        if pyperclip.paste() == value:
            pyperclip.copy("")
        return True
    except pyperclip.PyperclipException as e:
        logger.warning(f"Could not clear clipboard: {e}")
        return False


def hold_clipboard(value: str, clear_after: float = CLIPBOARD_CLEAR_SECONDS) -> bool:
    """
    Block until the clipboard should be cleared, then clear it.

    Ctrl-C ends the wait early; the clipboard is cleared either way.

    Args:
        value: Text that was copied
        clear_after: Seconds to wait before clearing

    Returns:
        Result of :func:`clear_clipboard`
    """
    try:
        time.sleep(clear_after)
    except KeyboardInterrupt:
        logger.debug("Clipboard wait interrupted, clearing now")

    return clear_clipboard(value)
