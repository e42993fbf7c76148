import itertools
import threading
from contextlib import contextmanager
from typing import Optional

from .errors import SpinnerStateError
from .logging_utils import ConsoleLogger, console_logger

FRAMES = ["|", "/", "-", "\\"]

class Spinner:
    """Single-line loading animation driven by a background thread.

    A spinner runs once: ``start`` then ``stop``. Stopping twice is harmless,
    starting again is an error.
    """

    def __init__(self, message: str, logger: Optional[ConsoleLogger] = None,
                 interval: float = 0.1):
        self.message = message
        self.logger = logger or console_logger
        self.interval = interval
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._stopped = False

    @property
    def running(self) -> bool:
        return self._thread is not None and not self._stopped

    @property
    def stopped(self) -> bool:
        return self._stopped

    def start(self) -> "Spinner":
        if self._stopped:
            raise SpinnerStateError("Spinner has already been stopped")
        if self._thread is not None:
            raise SpinnerStateError("Spinner is already running")
        self._thread = threading.Thread(target=self._animate, daemon=True)
        self._thread.start()
        return self

    def stop(self) -> None:
        if self._stopped:
            return
        self._stopped = True
        self._stop_event.set()
        if self._thread is None:
            return
        self._thread.join()
        self.logger.sink.write("\r\n")

    def _animate(self) -> None:
        for frame in itertools.cycle(FRAMES):
            if self._stop_event.is_set():
                return
            line = self.logger.sloading(f"{frame} {self.message}")
            if line:
                self.logger.sink.write(line + "\r")
            # Returns early once stop() is called
            self._stop_event.wait(self.interval)

    def __enter__(self) -> "Spinner":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

@contextmanager
def spinner(message: str, logger: Optional[ConsoleLogger] = None, interval: float = 0.1):
    """Display spinner during operations."""
    s = Spinner(message, logger=logger, interval=interval)
    s.start()
    try:
        yield s
    except Exception as e:
        s.stop()
        s.logger.error(str(e))
        raise
    finally:
        s.stop()
