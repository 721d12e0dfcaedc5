"""
Unit tests for clipboard integration in the CLI.
"""

import threading
from unittest.mock import patch, MagicMock
import pytest
from click.testing import CliRunner

from pwgen.__main__ import cli, copy_to_clipboard


class TestClipboardIntegration:
    """Test clipboard functionality."""

    @pytest.fixture
    def runner(self):
        """Create a CLI runner."""
        return CliRunner()

    @patch("threading.Timer")
    @patch("pyperclip.copy")
    def test_clipboard_copy_success(self, mock_copy, mock_timer, runner):
        """Test that --copy puts the generated password on the clipboard."""
        result = runner.invoke(cli, ["--copy", "-q", "-l", "16"])

        assert result.exit_code == 0
        password = result.output.strip().splitlines()[0]
        mock_copy.assert_called_once_with(password)

    @patch("threading.Timer")
    @patch("pyperclip.copy")
    def test_clipboard_auto_clear(self, mock_copy, mock_timer):
        """Test clipboard auto-clear scheduling."""
        mock_timer_instance = MagicMock()
        mock_timer.return_value = mock_timer_instance

        copy_to_clipboard("s3cret", clear_after=60)

        mock_timer.assert_called_once()
        assert mock_timer.call_args[0][0] == 60
        mock_timer_instance.start.assert_called_once()

    @patch("threading.Timer")
    @patch("pyperclip.paste", return_value="s3cret")
    @patch("pyperclip.copy")
    def test_clear_callback_clears_own_value(self, mock_copy, mock_paste, mock_timer):
        """Test that the clear callback empties the clipboard."""
        copy_to_clipboard("s3cret", clear_after=30)

        clear_clipboard = mock_timer.call_args[0][1]
        clear_clipboard()

        assert mock_copy.call_args_list[-1][0][0] == ""

    @patch("threading.Timer")
    @patch("pyperclip.paste", return_value="something else")
    @patch("pyperclip.copy")
    def test_clear_callback_keeps_other_value(self, mock_copy, mock_paste, mock_timer):
        """Test that the clear callback leaves newer clipboard contents alone."""
        copy_to_clipboard("s3cret", clear_after=30)

        clear_clipboard = mock_timer.call_args[0][1]
        clear_clipboard()

        mock_copy.assert_called_once_with("s3cret")

    @patch("threading.Timer")
    @patch("pyperclip.copy")
    def test_clear_disabled(self, mock_copy, mock_timer):
        """Test that clear_after=0 keeps the password on the clipboard."""
        copy_to_clipboard("s3cret", clear_after=0)

        mock_copy.assert_called_once_with("s3cret")
        mock_timer.assert_not_called()

    @patch("pyperclip.copy", side_effect=Exception("No clipboard mechanism"))
    def test_clipboard_failure(self, mock_copy, runner):
        """Test that clipboard failures still print the password."""
        result = runner.invoke(cli, ["--copy", "-l", "16"])

        assert result.exit_code == 0
        assert "Password: " in result.output
        assert "Could not copy to clipboard" in result.output

    @patch("pyperclip.copy")
    def test_clear_timer_does_not_block_exit(self, mock_copy):
        """Test that the clear timer is a daemon thread."""
        timer = copy_to_clipboard("s3cret", clear_after=3)

        try:
            assert timer is not None
            assert timer.daemon
            assert timer.is_alive()
        finally:
            timer.cancel()

    @patch("pyperclip.copy")
    def test_cli_leaves_only_daemon_threads(self, mock_copy, runner):
        """Test that the CLI returns without waiting for the clipboard clear."""
        before = set(threading.enumerate())

        result = runner.invoke(cli, ["-q", "-c", "--clear-after", "3"])

        new_threads = [t for t in threading.enumerate() if t not in before]
        try:
            assert result.exit_code == 0
            assert new_threads
            assert all(t.daemon for t in new_threads)
        finally:
            for t in new_threads:
                if isinstance(t, threading.Timer):
                    t.cancel()
