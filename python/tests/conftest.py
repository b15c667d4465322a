"""Shared pytest fixtures for passgen tests."""

from unittest.mock import patch

import pytest


@pytest.fixture
def fake_clipboard():
    """Replace the system clipboard with an in-memory one.

    Yields:
        Dict with the current ``value`` and every copied ``history`` entry
    """
    state = {"value": "", "history": []}

    def copy(text):
        state["value"] = text
        state["history"].append(text)

    def paste():
        return state["value"]

    with patch('pyperclip.copy', side_effect=copy), patch('pyperclip.paste', side_effect=paste):
        yield state
