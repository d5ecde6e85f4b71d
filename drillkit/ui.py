"""Terminal styling, status messages and a progress spinner."""

from __future__ import annotations

import itertools
import os
import sys
import threading

_RESET = "\x1b[0m"


def _paint(code: str, text: object) -> str:
    return f"\x1b[{code}m{text}{_RESET}"


def bold(text: object) -> str:
    """Return ``text`` rendered in bold."""
    return _paint("1", text)


def blue(text: object) -> str:
    """Return ``text`` rendered in blue."""
    return _paint("34", text)


def _red(text: object) -> str:
    return _paint("31", text)


def _green(text: object) -> str:
    return _paint("32", text)


def no_emoji() -> bool:
    """True when the NO_EMOJI environment variable is set."""
    return "NO_EMOJI" in os.environ


def warn(message: str) -> None:
    """Print a warning line in red."""
    mark = "!" if no_emoji() else "⚠️ "
    print(f"{_red(mark)} {_red(message)}")


def success(message: str) -> None:
    """Print a success line in green."""
    mark = "✓" if no_emoji() else "✅"
    print(f"{_green(mark)} {_green(message)}")


class Spinner:
    """A steadily ticking spinner drawn on stderr while work is in progress."""

    _FRAMES = "⠁⠂⠄⡀⢀⠠⠐⠈"
    _INTERVAL = 0.1

    def __init__(self, message: str) -> None:
        self.message = message
        self._stop = threading.Event()
        self._lock = threading.Lock()
        self._thread: threading.Thread | None = None
        self._stream = sys.stderr

    @property
    def running(self) -> bool:
        return self._thread is not None

    def _interactive(self) -> bool:
        isatty = getattr(self._stream, "isatty", None)
        return bool(isatty and isatty())

    def _draw(self, frame: str) -> None:
        if not self._interactive():
            return
        with self._lock:
            self._stream.write(f"\r\x1b[2K{frame} {self.message}")
            self._stream.flush()

    def _spin(self) -> None:
        for frame in itertools.cycle(self._FRAMES):
            self._draw(frame)
            if self._stop.wait(self._INTERVAL):
                break

    def set_message(self, message: str) -> None:
        """Change the text shown next to the spinner."""
        with self._lock:
            self.message = message

    def start(self) -> None:
        """Start ticking in a background thread."""
        if self._thread is not None:
            return
        self._stop.clear()
        self._thread = threading.Thread(target=self._spin, daemon=True)
        self._thread.start()

    def finish_and_clear(self) -> None:
        """Stop ticking and erase the spinner line."""
        if self._thread is None:
            return
        self._stop.set()
        self._thread.join()
        self._thread = None
        if self._interactive():
            with self._lock:
                self._stream.write("\r\x1b[2K")
                self._stream.flush()

    def __enter__(self) -> "Spinner":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.finish_and_clear()