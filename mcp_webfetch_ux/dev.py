"""
Dev mode runner for webfetch-ux MCP

Runs the SSE server (server_http) in a child process and restarts it when a
source file in the package changes. HOST / PORT are read the same way the
server reads them, so `PORT=5010 webfetch-ux-dev` serves on 5010.
"""
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Callable, Optional

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from .config import get_host, get_port

PACKAGE_DIR = Path(__file__).parent

# Editors emit several events per save; collapse them into one restart
DEBOUNCE_SECONDS = 0.5

# Opened/closed events fire on reads too
RESTART_EVENT_TYPES = ("created", "modified", "moved", "deleted")


def server_command() -> list[str]:
    return [sys.executable, "-m", "mcp_webfetch_ux.server_http"]


def is_source_change(event: FileSystemEvent) -> bool:
    """True for writes to .py files outside __pycache__"""
    if event.is_directory or event.event_type not in RESTART_EVENT_TYPES:
        return False
    path = str(getattr(event, "dest_path", "") or event.src_path)
    return path.endswith(".py") and "__pycache__" not in path


class ServerRestarter(FileSystemEventHandler):
    """Owns the server child process; restarts it on source changes"""

    def __init__(self, host: str, port: int, clock: Callable[[], float] = time.monotonic):
        self.host = host
        self.port = port
        self.clock = clock
        self.process: Optional[subprocess.Popen] = None
        self.last_start = float("-inf")

    def start(self) -> None:
        self.stop()
        env = dict(os.environ, HOST=self.host, PORT=str(self.port))
        self.process = subprocess.Popen(server_command(), env=env)
        self.last_start = self.clock()
        print(f"Serving on http://{self.host}:{self.port}/sse (PID: {self.process.pid})")

    def stop(self) -> None:
        if self.process is None:
            return
        if self.process.poll() is None:
            self.process.terminate()
            try:
                self.process.wait(timeout=5)
            except subprocess.TimeoutExpired:
                self.process.kill()
                self.process.wait()
        self.process = None

    def on_any_event(self, event: FileSystemEvent) -> None:
        if not is_source_change(event):
            return
        if self.clock() - self.last_start < DEBOUNCE_SECONDS:
            return
        print(f"{event.src_path} changed, restarting...")
        self.start()


def main():
    """Run the SSE server with auto-restart until Ctrl+C"""
    restarter = ServerRestarter(get_host(), get_port())
    restarter.start()

    observer = Observer()
    observer.schedule(restarter, str(PACKAGE_DIR), recursive=True)
    observer.start()
    print(f"Watching {PACKAGE_DIR} (Ctrl+C to stop)")

    try:
        while True:
            time.sleep(1)
            if restarter.process is not None and restarter.process.poll() is not None:
                print(f"Server exited with code {restarter.process.returncode}, waiting for a change")
                restarter.process = None
    except KeyboardInterrupt:
        print("\nStopping dev server...")
    finally:
        observer.stop()
        restarter.stop()

    observer.join()


if __name__ == "__main__":
    main()
