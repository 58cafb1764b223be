"""
Unit tests for the dev mode runner

Popen is patched; no server process is started.
"""
from unittest.mock import patch

from watchdog.events import (
    DirModifiedEvent,
    FileClosedEvent,
    FileCreatedEvent,
    FileModifiedEvent,
    FileMovedEvent,
)

from mcp_webfetch_ux.dev import (
    DEBOUNCE_SECONDS,
    ServerRestarter,
    is_source_change,
    server_command,
)


class FakeClock:
    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestIsSourceChange:
    """Test which filesystem events trigger a restart."""

    def test_python_file_modified(self):
        assert is_source_change(FileModifiedEvent("/pkg/mcp_webfetch_ux/formatters.py"))

    def test_python_file_created(self):
        assert is_source_change(FileCreatedEvent("/pkg/mcp_webfetch_ux/new.py"))

    def test_rename_to_python_file(self):
        assert is_source_change(FileMovedEvent("/pkg/mcp_webfetch_ux/.cli.py.swp", "/pkg/mcp_webfetch_ux/cli.py"))

    def test_ignores_bytecode_and_other_files(self):
        assert not is_source_change(FileModifiedEvent("/pkg/mcp_webfetch_ux/__pycache__/cli.cpython-312.pyc"))
        assert not is_source_change(FileModifiedEvent("/pkg/mcp_webfetch_ux/notes.md"))

    def test_ignores_directories_and_closes(self):
        assert not is_source_change(DirModifiedEvent("/pkg/mcp_webfetch_ux"))
        assert not is_source_change(FileClosedEvent("/pkg/mcp_webfetch_ux/cli.py"))


class TestServerRestarter:
    """Test process lifecycle with a patched Popen."""

    @patch('mcp_webfetch_ux.dev.subprocess.Popen')
    def test_start_passes_bind_address(self, mock_popen):
        restarter = ServerRestarter("0.0.0.0", 5010, clock=FakeClock())
        restarter.start()

        args, kwargs = mock_popen.call_args
        assert args[0] == server_command()
        assert args[0][-1] == "mcp_webfetch_ux.server_http"
        assert kwargs["env"]["HOST"] == "0.0.0.0"
        assert kwargs["env"]["PORT"] == "5010"

    @patch('mcp_webfetch_ux.dev.subprocess.Popen')
    def test_change_restarts_running_server(self, mock_popen):
        clock = FakeClock()
        mock_popen.return_value.poll.return_value = None
        restarter = ServerRestarter("127.0.0.1", 5002, clock=clock)
        restarter.start()

        clock.now += DEBOUNCE_SECONDS + 1
        restarter.on_any_event(FileModifiedEvent("/pkg/mcp_webfetch_ux/cli.py"))

        assert mock_popen.call_count == 2
        mock_popen.return_value.terminate.assert_called_once()

    @patch('mcp_webfetch_ux.dev.subprocess.Popen')
    def test_burst_of_events_restarts_once(self, mock_popen):
        clock = FakeClock()
        mock_popen.return_value.poll.return_value = None
        restarter = ServerRestarter("127.0.0.1", 5002, clock=clock)
        restarter.start()

        clock.now += DEBOUNCE_SECONDS + 1
        for _ in range(3):
            restarter.on_any_event(FileModifiedEvent("/pkg/mcp_webfetch_ux/cli.py"))

        assert mock_popen.call_count == 2

    @patch('mcp_webfetch_ux.dev.subprocess.Popen')
    def test_irrelevant_event_does_nothing(self, mock_popen):
        clock = FakeClock()
        restarter = ServerRestarter("127.0.0.1", 5002, clock=clock)
        restarter.start()

        clock.now += DEBOUNCE_SECONDS + 1
        restarter.on_any_event(FileModifiedEvent("/pkg/mcp_webfetch_ux/README.md"))

        assert mock_popen.call_count == 1

    @patch('mcp_webfetch_ux.dev.subprocess.Popen')
    def test_stop_skips_exited_process(self, mock_popen):
        mock_popen.return_value.poll.return_value = 1
        restarter = ServerRestarter("127.0.0.1", 5002, clock=FakeClock())
        restarter.start()
        restarter.stop()

        mock_popen.return_value.terminate.assert_not_called()
        assert restarter.process is None
