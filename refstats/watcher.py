"""
Watcher Layer - Re-run reports when the build log changes.

Monitors the build log's directory using watchdog and waits for the log to go
idle before signalling the main thread. Each signal triggers a complete,
fresh report; nothing is aggregated incrementally.
"""

import os
import threading
from pathlib import Path
from typing import Callable, Optional, Union

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer


class BuildLogEventHandler(FileSystemEventHandler):
    """Debounces filesystem events that touch a single build log."""

    def __init__(self, log_path: Path, changed: threading.Event, idle_timeout: float = 1.0):
        super().__init__()
        self.log_path = log_path
        self.changed = changed
        self.idle_timeout = idle_timeout
        self.idle_timer: Optional[threading.Timer] = None
        self.lock = threading.Lock()

    def on_any_event(self, event: FileSystemEvent) -> None:
        if event.is_directory:
            return
        if not self._touches_build_log(event):
            return
        self._handle_change()

    def _touches_build_log(self, event: FileSystemEvent) -> bool:
        # Editors and build tools often replace the log via a rename
        for raw in (event.src_path, getattr(event, "dest_path", "")):
            if raw and Path(os.fsdecode(raw)).resolve() == self.log_path:
                return True
        return False

    def _handle_change(self) -> None:
        with self.lock:
            if self.idle_timer is not None:
                self.idle_timer.cancel()
            self.idle_timer = threading.Timer(self.idle_timeout, self._on_idle_timeout)
            self.idle_timer.daemon = True
            self.idle_timer.start()

    def _on_idle_timeout(self) -> None:
        with self.lock:
            self.idle_timer = None
        self.changed.set()

    def cancel(self) -> None:
        with self.lock:
            if self.idle_timer is not None:
                self.idle_timer.cancel()
                self.idle_timer = None


def watch_build_log(path: Union[str, Path], on_change: Callable[[], None], idle_timeout: float = 1.0) -> None:
    """Call `on_change` on the main thread each time the build log settles.

    Args:
        path: Build log to monitor
        on_change: Callback that renders a fresh report
        idle_timeout: Seconds without further changes before `on_change` runs

    Raises:
        RuntimeError: If watching cannot be started
    """
    log_path = Path(path).resolve()
    watch_dir = log_path.parent
    if not watch_dir.is_dir():
        raise RuntimeError(f"Directory does not exist: {watch_dir}")

    changed = threading.Event()
    handler = BuildLogEventHandler(log_path, changed, idle_timeout)
    observer = Observer()
    try:
        observer.schedule(handler, str(watch_dir), recursive=False)
        observer.start()
    except OSError as e:
        raise RuntimeError(f"Failed to start watching {log_path}: {e}")

    print(f"Watching {log_path} for changes (idle timeout: {idle_timeout}s)")
    print("Press Ctrl+C to stop watching...")

    try:
        while True:
            if changed.wait(timeout=1.0):
                changed.clear()
                on_change()
    except KeyboardInterrupt:
        print("\nStopping build log watcher...")
    finally:
        handler.cancel()
        observer.stop()
        observer.join()
