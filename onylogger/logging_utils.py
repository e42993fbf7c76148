import logging
import sys
from datetime import datetime
from typing import Any, Callable, List, Optional, TextIO

from rich.console import Console
from rich.text import Text

from .formatting import Formatter, Level
from .models import LoggerConfig

# Side channel for problems that never reach the caller (e.g. stdin read errors)
logger = logging.getLogger("onylogger")

def make_console(file: Optional[TextIO] = None) -> Console:
    """Console that always emits level colors, whatever the environment says."""
    return Console(
        file=file,
        color_system="standard",
        force_terminal=True,
        no_color=False,
        highlight=False,
        markup=False,
        emoji=False,
        soft_wrap=True,
    )

class ConsoleSink:
    """Writes log lines to a terminal stream through rich."""

    def __init__(self, file: Optional[TextIO] = None):
        self.console = make_console(file)

    def emit(self, stamp: Text, rest: str, end: str = "\n") -> None:
        # Only the stamp goes through rich; the message is written as given
        self.console.print(stamp, end="")
        self.console.file.write(rest + end)
        self.console.file.flush()

    def write(self, raw: str) -> None:
        self.console.file.write(raw)
        self.console.file.flush()

class CaptureSink:
    """Collects plain log lines instead of writing them."""

    def __init__(self):
        self.records: List[str] = []

    def emit(self, stamp: Text, rest: str, end: str = "\n") -> None:
        self.records.append(stamp.plain + rest + end)

    def write(self, raw: str) -> None:
        self.records.append(raw)

    def getvalue(self) -> str:
        return "".join(self.records)

def _join(args) -> str:
    return " ".join(str(arg) for arg in args)

def _substitute(fmt: str, args) -> str:
    return fmt % args if args else fmt

class ConsoleLogger:
    """Leveled console logger.

    Every level has four shapes: ``info`` writes a line, ``infof`` writes a
    %-formatted line, ``sinfo`` and ``sinfof`` return the line instead of
    writing it. Returned lines are never colored.
    """

    def __init__(self, config: Optional[LoggerConfig] = None, sink=None,
                 stdin: Optional[TextIO] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        self.config = config or LoggerConfig()
        self.sink = sink or ConsoleSink()
        self.formatter = Formatter(clock)
        self._stdin = stdin

    @property
    def stdin(self) -> TextIO:
        return self._stdin if self._stdin is not None else sys.stdin

    def configure(self, **flags: Any) -> LoggerConfig:
        """Replace config flags, e.g. ``configure(debug_enabled=True)``."""
        self.config = LoggerConfig(**{**self.config.model_dump(), **flags})
        return self.config

    def log_message(self, level: Level, message: str, sink=None) -> str:
        """Format ``message`` at ``level`` and hand it to ``sink``; return the plain line."""
        if self.config.suppress_output:
            return ""
        level = Level(level)
        sink = sink if sink is not None else self.sink
        stamp, rest = self.formatter.render(level, message, colors=self.config.colors_enabled)
        # Prompts stay on the line the user types into
        sink.emit(stamp, rest, end="" if level is Level.USER_INPUT else "\n")
        return stamp.plain + rest

    def string_message(self, level: Level, message: str) -> str:
        return self.log_message(level, message, sink=CaptureSink())

    def info(self, *args: Any) -> None:
        self.log_message(Level.INFO, _join(args))

    def infof(self, fmt: str, *args: Any) -> None:
        self.info(_substitute(fmt, args))

    def sinfo(self, *args: Any) -> str:
        return self.string_message(Level.INFO, _join(args))

    def sinfof(self, fmt: str, *args: Any) -> str:
        return self.sinfo(_substitute(fmt, args))

    def warning(self, *args: Any) -> None:
        self.log_message(Level.WARNING, _join(args))

    def warningf(self, fmt: str, *args: Any) -> None:
        self.warning(_substitute(fmt, args))

    def swarning(self, *args: Any) -> str:
        return self.string_message(Level.WARNING, _join(args))

    def swarningf(self, fmt: str, *args: Any) -> str:
        return self.swarning(_substitute(fmt, args))

    def error(self, *args: Any) -> None:
        self.log_message(Level.ERROR, _join(args))

    def errorf(self, fmt: str, *args: Any) -> None:
        self.error(_substitute(fmt, args))

    def serror(self, *args: Any) -> str:
        return self.string_message(Level.ERROR, _join(args))

    def serrorf(self, fmt: str, *args: Any) -> str:
        return self.serror(_substitute(fmt, args))

    def debug(self, *args: Any) -> None:
        if self.config.debug_enabled:
            self.log_message(Level.DEBUG, _join(args))

    def debugf(self, fmt: str, *args: Any) -> None:
        if self.config.debug_enabled:
            self.debug(_substitute(fmt, args))

    def sdebug(self, *args: Any) -> str:
        if self.config.debug_enabled:
            return self.string_message(Level.DEBUG, _join(args))
        return ""

    def sdebugf(self, fmt: str, *args: Any) -> str:
        if self.config.debug_enabled:
            return self.sdebug(_substitute(fmt, args))
        return ""

    def success(self, *args: Any) -> None:
        self.log_message(Level.SUCCESS, _join(args))

    def successf(self, fmt: str, *args: Any) -> None:
        self.success(_substitute(fmt, args))

    def ssuccess(self, *args: Any) -> str:
        return self.string_message(Level.SUCCESS, _join(args))

    def ssuccessf(self, fmt: str, *args: Any) -> str:
        return self.ssuccess(_substitute(fmt, args))

    def sloading(self, message: str) -> str:
        return self.string_message(Level.LOADING, message)

    def user_input(self, prompt: str) -> Optional[str]:
        """Print ``prompt`` and read one line; ``None`` if input is already exhausted."""
        self.log_message(Level.USER_INPUT, prompt)
        try:
            line = self.stdin.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading input: %s", e)
            return None
        if not line:
            return None
        return line.rstrip("\r\n")

    def multiline_user_input(self, prompt: str) -> str:
        """Print ``prompt`` and read lines until an empty line or end of input.

        Each non-empty line is kept with a trailing newline. On a read error the
        lines gathered so far are returned.
        """
        self.log_message(Level.USER_INPUT, prompt)
        lines = []
        try:
            for line in iter(self.stdin.readline, ""):
                line = line.rstrip("\r\n")
                if not line:
                    break
                lines.append(line + "\n")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error reading input: %s", e)
        return "".join(lines)

def init_logger(stream: Optional[TextIO] = None) -> None:
    """Route side-channel messages to stdout as bare lines without timestamps."""
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    logger.propagate = False

# Single logger instance behind the module-level functions
console_logger = ConsoleLogger()

def configure(**flags: Any) -> LoggerConfig:
    return console_logger.configure(**flags)

def log_message(level: Level, message: str) -> str:
    return console_logger.log_message(level, message)

info = console_logger.info
infof = console_logger.infof
sinfo = console_logger.sinfo
sinfof = console_logger.sinfof
warning = console_logger.warning
warningf = console_logger.warningf
swarning = console_logger.swarning
swarningf = console_logger.swarningf
error = console_logger.error
errorf = console_logger.errorf
serror = console_logger.serror
serrorf = console_logger.serrorf
debug = console_logger.debug
debugf = console_logger.debugf
sdebug = console_logger.sdebug
sdebugf = console_logger.sdebugf
success = console_logger.success
successf = console_logger.successf
ssuccess = console_logger.ssuccess
ssuccessf = console_logger.ssuccessf
user_input = console_logger.user_input
multiline_user_input = console_logger.multiline_user_input
