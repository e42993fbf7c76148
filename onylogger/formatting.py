"""Level styling and the single-line ``[timestamp] [emoji] message`` format."""

from datetime import datetime
from enum import Enum
from typing import Callable, Optional, Tuple

from rich.text import Text

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

class Level(str, Enum):
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    DEBUG = "DEBUG"
    SUCCESS = "SUCCESS"
    USER_INPUT = "USERINPUT"
    LOADING = "LOADING"

    @property
    def color(self) -> Optional[str]:
        return LEVEL_COLORS[self]

    @property
    def emoji(self) -> str:
        return LEVEL_EMOJIS[self]

# None means the timestamp is printed without a color escape
LEVEL_COLORS = {
    Level.INFO: "magenta",
    Level.WARNING: "yellow",
    Level.ERROR: "red",
    Level.DEBUG: "cyan",
    Level.SUCCESS: "green",
    Level.USER_INPUT: None,
    Level.LOADING: "cyan",
}

LEVEL_EMOJIS = {
    Level.INFO: "📜",
    Level.WARNING: "⚠️",
    Level.ERROR: "❌",
    Level.DEBUG: "🐛",
    Level.SUCCESS: "✅",
    Level.USER_INPUT: "📝",
    Level.LOADING: "⏳",
}

class Formatter:
    """Render log lines for a level using a clock that can be pinned in tests."""

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self.clock = clock or datetime.now

    def timestamp(self) -> str:
        return self.clock().strftime(TIMESTAMP_FORMAT)

    def render(self, level: Level, message: str, colors: bool = False) -> Tuple[Text, str]:
        """Split a line into the timestamp bracket and the rest.

        Only the bracket is rich ``Text`` (styled when ``colors`` is on); the rest
        is returned verbatim so tabs and control characters in ``message`` survive.
        """
        level = Level(level)
        style = level.color if colors and level.color else ""
        stamp = Text(f"[{self.timestamp()}]", style=style)
        return stamp, f" [{level.emoji}] {message}"

    def format(self, level: Level, message: str) -> str:
        stamp, rest = self.render(level, message)
        return stamp.plain + rest
