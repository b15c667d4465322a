"""
Unit tests for clipboard integration.
"""

from unittest.mock import patch
import pyperclip
import pytest

from passgen.generator import generate_password
from passgen.utils.clipboard import clear_clipboard, copy_to_clipboard, hold_clipboard


class TestClipboardIntegration:
    """Test clipboard functionality for generated passwords."""

    def test_clipboard_copy_success(self, fake_clipboard):
        """Test successful clipboard copying."""
        password = generate_password(length=16)

        assert copy_to_clipboard(password)
        assert fake_clipboard["value"] == password

    @patch('pyperclip.copy')
    def test_clipboard_copy_exception_handling(self, mock_copy):
        """Test handling of clipboard copy exceptions."""
        mock_copy.side_effect = pyperclip.PyperclipException("No clipboard mechanism")

        assert not copy_to_clipboard("secret")

    def test_clear_when_unchanged(self, fake_clipboard):
        """Test that the clipboard is cleared if it still holds the password."""
        fake_clipboard["value"] = "secret"

        assert clear_clipboard("secret")
        assert fake_clipboard["value"] == ""

    def test_keep_when_changed(self, fake_clipboard):
        """Test that newer clipboard contents are left alone."""
        fake_clipboard["value"] = "something else"

        assert clear_clipboard("secret")
        assert fake_clipboard["value"] == "something else"

    @patch('pyperclip.paste')
    def test_clear_exception_handling(self, mock_paste):
        """Test handling of clipboard read failures."""
        mock_paste.side_effect = pyperclip.PyperclipException("No clipboard mechanism")

        assert not clear_clipboard("secret")

    @patch('passgen.utils.clipboard.time.sleep')
    def test_hold_waits_then_clears(self, mock_sleep, fake_clipboard):
        """Test that holding waits for the delay and then clears."""
        copy_to_clipboard("secret")

        assert hold_clipboard("secret", 60)

        mock_sleep.assert_called_once_with(60)
        assert fake_clipboard["value"] == ""

    @patch('passgen.utils.clipboard.time.sleep')
    def test_hold_interrupted_still_clears(self, mock_sleep, fake_clipboard):
        """Test that Ctrl-C during the wait clears the clipboard right away."""
        mock_sleep.side_effect = KeyboardInterrupt
        copy_to_clipboard("secret")

        assert hold_clipboard("secret", 60)
        assert fake_clipboard["value"] == ""

    def test_hold_short_delay(self, fake_clipboard):
        """Test a real, short wait."""
        copy_to_clipboard("secret")

        hold_clipboard("secret", 0.05)

        assert fake_clipboard["value"] == ""


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
